from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

"""Declarative TypeScript source model and its renderer.

Entities are plain mutable dataclasses populated by the caller and rendered
once, top down, into a shared :class:`TextBuffer`. Each entity writes its own
fragment through :mod:`tscodegen.formatting` and delegates to its children
in insertion order.
"""

from . import formatting as fmt
from .codegen import TextBuffer

logger = logging.getLogger(__name__)


class Access(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class Writable(Protocol):
    def write(self, buffer: TextBuffer, tab: int = 0) -> None: ...


def render(entity: Writable, tab: int = 0) -> str:
    """Render a single entity into a fresh buffer and return the text."""
    buffer = TextBuffer()
    entity.write(buffer, tab)
    return buffer.to_text()


def _has_comment(text: str) -> bool:
    return bool(text and text.strip())


# -----------------------------
# Leaf & members
# -----------------------------

@dataclass(eq=False)
class TSParameter:
    type: str = ""
    name: str = "any"
    default_value: str | int | float | bool | None = None

    def render(self) -> str:
        sb = TextBuffer()
        sb.append(f"{self.name}: {self.type}")
        # 0, False and "" suppress the default just like None
        if self.default_value:
            sb.append(" = ").append(self.default_value)
        return sb.to_text()

    def write(self, buffer: TextBuffer, tab: int = 0) -> None:
        buffer.append(self.render())

    def __str__(self) -> str:
        return self.render()


@dataclass(eq=False)
class TSProperty:
    comment: str = ""
    access: Access = Access.PUBLIC
    is_static: bool = False
    type: str = "any"
    name: str = ""
    default_value: str = ""

    def write(self, buffer: TextBuffer, tab: int = 0) -> None:
        if _has_comment(self.comment):
            buffer.append_line(fmt.comment(self.comment, tab))
        buffer.append_line(
            fmt.property_declaration(
                tab, self.access, self.type or "any", self.name, self.default_value, self.is_static
            )
        )


@dataclass(eq=False)
class TSMethod:
    comment: str = ""
    access: Access = Access.PUBLIC
    is_static: bool = False
    is_readonly: bool = False
    return_type: str = "void"
    name: str = ""
    parameters: list[TSParameter] = field(default_factory=list)
    body: list[str] = field(default_factory=list)

    def add_parameters(self, *parameters: TSParameter) -> None:
        self.parameters.extend(parameters)

    def append_codes(self, *codes: str) -> None:
        self.body.extend(codes)

    def write(self, buffer: TextBuffer, tab: int = 0) -> None:
        if _has_comment(self.comment):
            buffer.append_line(fmt.comment(self.comment, tab))
        buffer.append(
            fmt.method_declaration(
                tab,
                self.access,
                self.return_type or "void",
                self.name,
                self.is_static,
                [p.render() for p in self.parameters],
                self.is_readonly,
            )
        )
        fmt.begin_code_block(buffer)
        for code in self.body:
            buffer.append_line(f"{fmt.tab(tab + 1)}{code}")
        fmt.end_code_block(buffer, tab)


# -----------------------------
# Containers
# -----------------------------

@dataclass(eq=False)
class TSInterface:
    comment: str = ""
    name: str = ""
    is_export: bool = False
    is_export_as_default: bool = False
    properties: list[TSProperty] = field(default_factory=list)

    def add_property(self, prop: TSProperty) -> None:
        self.properties.append(prop)

    def write(self, buffer: TextBuffer, tab: int = 0) -> None:
        if _has_comment(self.comment):
            buffer.append_line(fmt.comment(self.comment, tab))
        buffer.append(
            fmt.interface_declaration(tab, self.name, self.is_export, self.is_export_as_default)
        )
        fmt.begin_code_block(buffer)
        for p in self.properties:
            p.write(buffer, tab + 1)
        fmt.end_code_block(buffer, tab)


@dataclass(eq=False)
class TSClass:
    comment: str = ""
    access: Access = Access.PUBLIC
    name: str = ""
    inherit_class_name: str = ""
    is_export: bool = False
    is_export_as_default: bool = False
    decorators: list[str] = field(default_factory=list)
    implement_interfaces: list[str] = field(default_factory=list)
    properties: list[TSProperty] = field(default_factory=list)
    methods: list[TSMethod] = field(default_factory=list)

    def add_decorator(self, decorator: str) -> None:
        self.decorators.append(decorator)

    def add_implement_interface(self, name: str) -> None:
        self.implement_interfaces.append(name)

    def add_property(self, prop: TSProperty) -> None:
        self.properties.append(prop)

    def add_method(self, method: TSMethod) -> None:
        self.methods.append(method)

    def write(self, buffer: TextBuffer, tab: int = 0) -> None:
        if _has_comment(self.comment):
            buffer.append_line(fmt.comment(self.comment, tab))
        for decorator in self.decorators:
            buffer.append_line(fmt.class_decorator(decorator, tab))

        buffer.append(
            fmt.class_declaration(
                tab,
                self.name,
                self.inherit_class_name,
                self.implement_interfaces,
                self.is_export,
                self.is_export_as_default,
            )
        )
        fmt.begin_code_block(buffer)

        if self.properties:
            fmt.begin_region(buffer, "Properties", tab + 1)
            for p in self.properties:
                p.write(buffer, tab + 1)
            fmt.end_region(buffer, tab + 1)
            if self.methods:
                buffer.append_line()

        if self.methods:
            fmt.begin_region(buffer, "Methods", tab + 1)
            for m in self.methods:
                m.write(buffer, tab + 1)
            fmt.end_region(buffer, tab + 1)

        fmt.end_code_block(buffer, tab)


# -----------------------------
# Root
# -----------------------------

@dataclass(eq=False)
class TSFile:
    directory_path: str = ""
    name: str = ""
    file_extension: str = "ts"
    author: str = ""
    date: datetime.date | None = None
    version: str = ""
    comment: str = ""
    imports: list[str] = field(default_factory=list)
    supplements: list[str] = field(default_factory=list)
    interfaces: list[TSInterface] = field(default_factory=list)
    classes: list[TSClass] = field(default_factory=list)

    @property
    def file_name(self) -> str:
        return f"{self.name}.{self.file_extension}"

    @property
    def file_path(self) -> str:
        return f"{self.directory_path}/{self.file_name}"

    def add_import(self, imp: str) -> None:
        self.imports.append(imp)

    def add_supplement(self, supplement: str) -> None:
        self.supplements.append(supplement)

    def add_interface(self, interface: TSInterface) -> None:
        self.interfaces.append(interface)

    def add_class(self, cls: TSClass) -> None:
        self.classes.append(cls)

    def write(self, buffer: TextBuffer, tab: int = 0) -> None:
        logger.debug(
            "Rendering %s: %d import(s), %d interface(s), %d class(es)",
            self.file_name, len(self.imports), len(self.interfaces), len(self.classes),
        )
        buffer.append_line(fmt.file_header(self.author, self.date, self.version, self.comment))

        for imp in self.imports:
            buffer.append_line(f"import {imp};")
        buffer.append_line()

        for supplement in self.supplements:
            buffer.append_line(f"{fmt.tab(tab)}{supplement}")
        buffer.append_line()

        # interfaces always precede classes
        for inter in self.interfaces:
            fmt.begin_region(buffer, f"Interface {inter.name}", tab)
            inter.write(buffer, tab)
            fmt.end_region(buffer, tab)
            buffer.append_line()

        for cls in self.classes:
            fmt.begin_region(buffer, f"Class {cls.name}", tab)
            cls.write(buffer, tab)
            fmt.end_region(buffer, tab)
            buffer.append_line()

    def to_code(self) -> str:
        return render(self)
