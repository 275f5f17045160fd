import datetime
import json
from pathlib import Path

import pytest

from tscodegen.loader import ModelError, load_model, write_output
from tscodegen.model import Access, TSFile
from tscodegen.types import mk_class, mk_file, mk_method, mk_parameter, mk_property, parse_access, parse_date

MODEL_YAML = """\
file:
  name: user
  directory: out/models
  author: Test Author
  date: 2023-01-01
  version: "1.0.0"
  comment: Generated model
  imports:
    - '{ Base } from "./base"'
  interfaces:
    - name: IUser
      export: true
      properties:
        - {name: id, type: string}
  classes:
    - name: User
      export: true
      extends: Base
      implements: [IUser]
      decorators: [Entity()]
      properties:
        - {name: id, type: string, access: private}
      methods:
        - name: getId
          return_type: string
          body: ["return this.id;"]
"""


def test_mk_parameter_and_property() -> None:
    p = mk_parameter({"name": "id", "type": "string", "default": '"x"'})
    assert p.render() == 'id: string = "x"'
    prop = mk_property({"name": "count", "type": "number", "access": "private", "static": True, "default": "0"})
    assert prop.access is Access.PRIVATE and prop.is_static and prop.default_value == "0"
    assert mk_property({"name": "v"}).type == "any"


def test_mk_method_defaults() -> None:
    m = mk_method({"name": "run"})
    assert m.return_type == "void" and m.access is Access.PUBLIC
    assert m.parameters == [] and m.body == []


def test_mk_class_collections() -> None:
    c = mk_class({
        "name": "User",
        "implements": ["IA", "IB"],
        "decorators": ["Component"],
        "methods": [{"name": "m", "parameters": [{"name": "a", "type": "number"}]}],
    })
    assert c.implement_interfaces == ["IA", "IB"]
    assert c.decorators == ["Component"]
    assert c.methods[0].parameters[0].render() == "a: number"


def test_mk_file_defaults() -> None:
    f = mk_file({})
    assert isinstance(f, TSFile)
    assert f.file_extension == "ts" and f.date is None and f.classes == []


@pytest.mark.parametrize(
    "bad, match",
    [
        ({"classes": [{"comment": "no name"}]}, "class name"),
        ({"classes": [{"name": "A", "access": "internal"}]}, "Invalid access"),
        ({"classes": "A"}, "must be a list"),
        ({"interfaces": ["IA"]}, "interface must be a mapping"),
        ({"date": "01/02/2023"}, "Invalid date"),
    ],
)
def test_mk_file_rejects_malformed(bad: dict, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        mk_file(bad)  # type: ignore[arg-type]


def test_parse_helpers() -> None:
    assert parse_access(None) is Access.PUBLIC
    assert parse_access("protected") is Access.PROTECTED
    assert parse_date("2023-03-05") == datetime.date(2023, 3, 5)
    assert parse_date(datetime.datetime(2023, 3, 5, 10, 0)) == datetime.date(2023, 3, 5)
    assert parse_date(None) is None


def test_load_yaml_model(tmp_path: Path) -> None:
    path = tmp_path / "model.yml"
    path.write_text(MODEL_YAML, encoding="utf-8")
    model = load_model(path)
    assert model.name == "user"
    assert model.file_path == "out/models/user.ts"
    assert model.date == datetime.date(2023, 1, 1)
    text = model.to_code()
    assert "// Version: 1.0.0" in text
    assert 'import { Base } from "./base";' in text
    assert "@Entity()\nexport class User extends Base implements IUser {" in text
    assert "privateid: string;" in text
    assert "        return this.id;" in text


def test_json_and_yaml_render_the_same(tmp_path: Path) -> None:
    import yaml

    yml = tmp_path / "model.yml"
    yml.write_text(MODEL_YAML, encoding="utf-8")
    data = yaml.safe_load(MODEL_YAML)
    data["file"]["date"] = "2023-01-01"
    js = tmp_path / "model.json"
    js.write_text(json.dumps(data), encoding="utf-8")
    assert load_model(yml).to_code() == load_model(js).to_code()


def test_name_defaults_to_file_stem(tmp_path: Path) -> None:
    path = tmp_path / "order.yaml"
    path.write_text("author: me\n", encoding="utf-8")
    assert load_model(path).file_name == "order.ts"


def test_missing_model(tmp_path: Path) -> None:
    with pytest.raises(ModelError, match="not found"):
        load_model(tmp_path / "nope.yml")


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("classes: [unclosed\n", encoding="utf-8")
    with pytest.raises(ModelError, match="Invalid YAML"):
        load_model(path)


def test_impossible_date_is_model_error(tmp_path: Path) -> None:
    path = tmp_path / "bad_date.yml"
    path.write_text("name: x\ndate: 2023-02-30\n", encoding="utf-8")
    with pytest.raises(ModelError, match="Invalid YAML") as info:
        load_model(path)
    assert isinstance(info.value.__cause__, ValueError)


def test_invalid_utf8_is_model_error(tmp_path: Path) -> None:
    path = tmp_path / "latin.yml"
    path.write_bytes(b"name: \xff\xfe\n")
    with pytest.raises(ModelError, match="Cannot read") as info:
        load_model(path)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


def test_non_mapping_document(tmp_path: Path) -> None:
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ModelError, match="Expected a mapping"):
        load_model(path)


def test_builder_error_is_wrapped(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("classes:\n  - name: A\n    access: friend\n", encoding="utf-8")
    with pytest.raises(ModelError, match="Invalid access") as info:
        load_model(path)
    assert isinstance(info.value.__cause__, ValueError)


def test_write_output_to_model_path(tmp_path: Path) -> None:
    model = TSFile(directory_path=str(tmp_path / "gen"), name="user")
    target = write_output(model, "text")
    assert target == tmp_path / "gen" / "user.ts"
    assert target.read_text(encoding="utf-8") == "text"


def test_write_output_explicit_path(tmp_path: Path) -> None:
    target = write_output(TSFile(name="x"), "abc", tmp_path / "a" / "b.ts")
    assert target.read_text(encoding="utf-8") == "abc"


def test_write_output_without_directory_uses_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    target = write_output(TSFile(name="x"), "abc")
    assert target == Path("x.ts")
    assert (tmp_path / "x.ts").read_text(encoding="utf-8") == "abc"
