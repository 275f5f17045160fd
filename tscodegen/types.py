from __future__ import annotations

import datetime
from typing import Any, NotRequired, TypedDict

from .model import Access, TSClass, TSFile, TSInterface, TSMethod, TSParameter, TSProperty


class ParameterSpec(TypedDict):
    name: str
    type: NotRequired[str]
    default: NotRequired[str | int | float | bool | None]


class PropertySpec(TypedDict):
    name: str
    type: NotRequired[str]
    access: NotRequired[str]
    static: NotRequired[bool]
    default: NotRequired[str]
    comment: NotRequired[str]


class MethodSpec(TypedDict):
    name: str
    return_type: NotRequired[str]
    access: NotRequired[str]
    static: NotRequired[bool]
    readonly: NotRequired[bool]
    comment: NotRequired[str]
    parameters: NotRequired[list[ParameterSpec]]
    body: NotRequired[list[str]]


class InterfaceSpec(TypedDict):
    name: str
    comment: NotRequired[str]
    export: NotRequired[bool]
    export_default: NotRequired[bool]
    properties: NotRequired[list[PropertySpec]]


class ClassSpec(TypedDict):
    name: str
    comment: NotRequired[str]
    access: NotRequired[str]
    extends: NotRequired[str]
    export: NotRequired[bool]
    export_default: NotRequired[bool]
    decorators: NotRequired[list[str]]
    implements: NotRequired[list[str]]
    properties: NotRequired[list[PropertySpec]]
    methods: NotRequired[list[MethodSpec]]


class FileSpec(TypedDict, total=False):
    name: str
    directory: str
    extension: str
    author: str
    date: str | datetime.date
    version: str
    comment: str
    imports: list[str]
    supplements: list[str]
    interfaces: list[InterfaceSpec]
    classes: list[ClassSpec]


def _name(data: Any, kind: str) -> str:
    if not isinstance(data, dict):
        raise ValueError(f"{kind} must be a mapping, got {type(data).__name__}")
    name = data.get("name")
    if not isinstance(name, str):
        raise ValueError(f"{kind} name missing or not a string")
    return name


def _list(data: Any, key: str, owner: str) -> list[Any]:
    value = data.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{owner}: '{key}' must be a list")
    return value


def _text(data: Any, key: str, default: str = "") -> str:
    value = data.get(key)
    return default if value is None else str(value)


def parse_access(value: Any) -> Access:
    if value is None:
        return Access.PUBLIC
    try:
        return Access(str(value))
    except ValueError:
        allowed = ", ".join(a.value for a in Access)
        raise ValueError(f"Invalid access '{value}'. Allowed: {allowed}") from None


def parse_date(value: Any) -> datetime.date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value))
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD") from None


def mk_parameter(pd: ParameterSpec) -> TSParameter:
    name = _name(pd, "parameter")
    return TSParameter(
        type=_text(pd, "type"),
        name=name,
        default_value=pd.get("default"),
    )


def mk_property(pd: PropertySpec) -> TSProperty:
    name = _name(pd, "property")
    return TSProperty(
        comment=_text(pd, "comment"),
        access=parse_access(pd.get("access")),
        is_static=bool(pd.get("static", False)),
        type=_text(pd, "type", "any"),
        name=name,
        default_value=_text(pd, "default"),
    )


def mk_method(md: MethodSpec) -> TSMethod:
    name = _name(md, "method")
    owner = f"method '{name}'"
    return TSMethod(
        comment=_text(md, "comment"),
        access=parse_access(md.get("access")),
        is_static=bool(md.get("static", False)),
        is_readonly=bool(md.get("readonly", False)),
        return_type=_text(md, "return_type", "void"),
        name=name,
        parameters=[mk_parameter(p) for p in _list(md, "parameters", owner)],
        body=[str(line) for line in _list(md, "body", owner)],
    )


def mk_interface(idata: InterfaceSpec) -> TSInterface:
    name = _name(idata, "interface")
    return TSInterface(
        comment=_text(idata, "comment"),
        name=name,
        is_export=bool(idata.get("export", False)),
        is_export_as_default=bool(idata.get("export_default", False)),
        properties=[mk_property(p) for p in _list(idata, "properties", f"interface '{name}'")],
    )


def mk_class(cd: ClassSpec) -> TSClass:
    name = _name(cd, "class")
    owner = f"class '{name}'"
    return TSClass(
        comment=_text(cd, "comment"),
        access=parse_access(cd.get("access")),
        name=name,
        inherit_class_name=_text(cd, "extends"),
        is_export=bool(cd.get("export", False)),
        is_export_as_default=bool(cd.get("export_default", False)),
        decorators=[str(d) for d in _list(cd, "decorators", owner)],
        implement_interfaces=[str(i) for i in _list(cd, "implements", owner)],
        properties=[mk_property(p) for p in _list(cd, "properties", owner)],
        methods=[mk_method(m) for m in _list(cd, "methods", owner)],
    )


def mk_file(fd: FileSpec) -> TSFile:
    if not isinstance(fd, dict):
        raise ValueError(f"file must be a mapping, got {type(fd).__name__}")
    return TSFile(
        directory_path=_text(fd, "directory"),
        name=_text(fd, "name"),
        file_extension=_text(fd, "extension", "ts"),
        author=_text(fd, "author"),
        date=parse_date(fd.get("date")),
        version=_text(fd, "version"),
        comment=_text(fd, "comment"),
        imports=[str(i) for i in _list(fd, "imports", "file")],
        supplements=[str(s) for s in _list(fd, "supplements", "file")],
        interfaces=[mk_interface(i) for i in _list(fd, "interfaces", "file")],
        classes=[mk_class(c) for c in _list(fd, "classes", "file")],
    )
