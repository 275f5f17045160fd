from __future__ import annotations

"""Fragment builders for TypeScript declarations.

Every function here is pure: it takes an indentation depth plus the
structural pieces of a declaration and returns (or appends) the text of one
line. Entities in :mod:`tscodegen.model` call these and never format syntax
themselves.
"""

import datetime
from collections.abc import Sequence
from enum import Enum

from .codegen import TextBuffer

INDENT_UNIT = "    "
BEAUTY_LINE_WIDTH = 50


def _token(access: Enum | str) -> str:
    return access.value if isinstance(access, Enum) else access


def tab(n: int) -> str:
    """Indentation for ``n`` levels; negative levels give no indentation."""
    return INDENT_UNIT * max(0, n)


def beauty_line() -> str:
    return "// " + "-" * BEAUTY_LINE_WIDTH + "\n"


def format_date(date: datetime.date) -> str:
    return f"{date.year}-{date.month:02d}-{date.day:02d}"


def file_header(author: str, date: datetime.date | None, version: str, comment: str) -> str:
    sb = TextBuffer()
    sb.append(beauty_line())
    sb.append_line(f"// Author: {author}")
    if date is not None:
        sb.append_line(f"// Date: {format_date(date)}")
    sb.append_line(f"// Version: {version}")
    sb.append_line(f"// Description: {comment}")
    sb.append(beauty_line())
    return sb.to_text()


def comment(content: str, tab_level: int) -> str:
    return f"{tab(tab_level)}/** {content} */"


def class_decorator(decorator: str, tab_level: int = 0) -> str:
    return f"{tab(tab_level)}@{decorator}"


def _export_prefix(is_export: bool, is_export_as_default: bool) -> str:
    # "default" is only valid after "export"
    if not is_export:
        return ""
    return "export default " if is_export_as_default else "export "


def class_declaration(
    tab_level: int,
    name: str,
    inherit_class: str = "",
    interfaces: Sequence[str] = (),
    is_export: bool = False,
    is_export_as_default: bool = False,
) -> str:
    head = f"{tab(tab_level)}{_export_prefix(is_export, is_export_as_default)}class {name}"
    if inherit_class:
        head += f" extends {inherit_class}"
    if interfaces:
        head += f" implements {', '.join(interfaces)}"
    return head


def interface_declaration(
    tab_level: int,
    name: str,
    is_export: bool = False,
    is_export_as_default: bool = False,
) -> str:
    return f"{tab(tab_level)}{_export_prefix(is_export, is_export_as_default)}interface {name}"


def property_declaration(
    tab_level: int,
    access: Enum | str,
    type_name: str,
    name: str,
    default_value: str,
    is_static: bool = False,
) -> str:
    """
    Single property line. Public access emits no modifier; any other access
    token is written directly against what follows (``privatex: number;``).
    """
    token = _token(access)
    parts = [tab(tab_level)]
    if token != "public":
        parts.append(token)
    if is_static:
        parts.append(" static ")
    parts.append(f"{name}: {type_name}")
    if default_value:
        parts.append(f" = {default_value}")
    parts.append(";")
    return "".join(parts)


def method_declaration(
    tab_level: int,
    access: Enum | str,
    return_type: str,
    name: str,
    is_static: bool = False,
    parameters: Sequence[str] = (),
    is_readonly: bool = False,
) -> str:
    parts = [tab(tab_level), _token(access)]
    if is_static:
        parts.append(" static")
    if is_readonly:
        parts.append(" get")
    parts.append(f" {name}({', '.join(parameters)}):")
    parts.append(f" {return_type}" if return_type else " void")
    return "".join(parts)


def begin_code_block(sb: TextBuffer) -> None:
    sb.append_line(" {")


def end_code_block(sb: TextBuffer, tab_level: int) -> None:
    sb.append_line(f"{tab(tab_level)}}}")


def begin_region(sb: TextBuffer, content: str, tab_level: int) -> None:
    sb.append_line(f"{tab(tab_level)}// #region {content}")


def end_region(sb: TextBuffer, tab_level: int) -> None:
    sb.append_line(f"{tab(tab_level)}// #endregion")
