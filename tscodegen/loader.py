"""
Model loader: reads a YAML (or JSON) model document into a TSFile.

A document is either a file mapping or a mapping with a top-level ``file``
key. See :mod:`tscodegen.types` for the accepted keys.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .model import TSFile
from .types import mk_file

logger = logging.getLogger(__name__)


class ModelError(Exception):
    """Raised when a model document is missing or invalid."""


def load_model(path: Path) -> TSFile:
    """Load a model document and build its entity graph.

    Raises:
        ModelError: If the file is missing, unreadable or malformed.
    """
    path = Path(path)
    if not path.is_file():
        raise ModelError(f"Model file not found: {path}")

    logger.debug("Loading model from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ModelError(f"Cannot read {path}: {e}") from e

    # impossible timestamps (2023-02-30) surface as ValueError from the resolver
    try:
        data = yaml.safe_load(raw)
    except (yaml.YAMLError, ValueError) as e:
        raise ModelError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ModelError(f"Expected a mapping in {path}, got {type(data).__name__}")

    file_data = data["file"] if "file" in data else data
    if isinstance(file_data, dict) and not file_data.get("name"):
        file_data = {**file_data, "name": path.stem}

    try:
        model = mk_file(file_data)
    except ValueError as e:
        raise ModelError(f"Invalid model in {path}: {e}") from e

    logger.info(
        "Loaded model '%s' with %d interface(s) and %d class(es)",
        model.name, len(model.interfaces), len(model.classes),
    )
    return model


def write_output(model: TSFile, text: str, path: Path | None = None) -> Path:
    """Write rendered text to ``path``, or to the model's own file path.

    A model without a directory is written to the current directory rather
    than to ``/<file_name>``.
    """
    if path is not None:
        target = Path(path)
    elif model.directory_path:
        target = Path(model.file_path)
    else:
        target = Path(model.file_name)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ModelError(f"Cannot write {target}: {e}") from e
    logger.info("Wrote %s", target)
    return target
