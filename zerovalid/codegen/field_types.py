"""Descriptions of Go field types used when generating extractor code."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol


class Kind(enum.IntEnum):
    """The broad category a field type resolves to."""

    BASIC = 0
    STRUCT = 1
    CUSTOM = 2
    INTERFACE = 3


class Visitor(Protocol):
    """Receives the parts of a field type as it is walked."""

    def visit_basic(self, basic: Basic) -> None: ...

    def visit_custom(self, custom: Custom) -> None: ...

    def visit_generic(self, generic: Generic) -> None: ...

    def visit_ptr(self, ptr: Ptr) -> None: ...

    def visit_slice(self, slice_: Slice) -> None: ...


def _path_base(path: str) -> str:
    """The last element of a slash-separated path."""
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


class Basic(str, enum.Enum):
    """A predeclared Go type."""

    STRING = "string"
    INT = "int"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOL = "bool"
    BYTE = "byte"

    @property
    def kind(self) -> Kind:
        return Kind.BASIC

    def unwraps(self) -> tuple:
        return ()

    def go_type_string(self) -> str:
        return self.value

    def go_type_string_with_alias(self, alias: str) -> str:
        return self.go_type_string()

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_basic(self)

    def __str__(self) -> str:
        return self.value


def parse_basic(name: str) -> Basic | None:
    """The basic type called ``name``, or None if it is not one."""
    try:
        return Basic(name)
    except ValueError:
        return None


@dataclass(frozen=True)
class Custom:
    """A named type; empty package name and path mean the type's own package."""

    name: str
    pkg_name: str = ""
    pkg_path: str = ""

    @property
    def kind(self) -> Kind:
        return Kind.CUSTOM

    def unwraps(self) -> tuple:
        return ()

    def _qualified(self) -> str | None:
        if self.pkg_name:
            return f"{self.pkg_name}.{self.name}"
        if self.pkg_path:
            return f"{_path_base(self.pkg_path)}.{self.name}"
        return None

    def go_type_string(self) -> str:
        return self._qualified() or self.name

    def go_type_string_with_alias(self, alias: str) -> str:
        return self._qualified() or f"{alias}.{self.name}"

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_custom(self)

    def __str__(self) -> str:
        return self.go_type_string()


@dataclass(frozen=True)
class Generic:
    """A generic type instantiated with one type parameter."""

    generic_type: Basic | Custom | Generic | Ptr | Slice
    parameter_type: Basic | Custom | Generic | Ptr | Slice

    @property
    def kind(self) -> Kind:
        return Kind.CUSTOM

    def unwrap(self) -> Basic | Custom | Generic | Ptr | Slice:
        return self.parameter_type

    def unwraps(self) -> tuple:
        return (self.generic_type, self.parameter_type)

    def go_type_string(self) -> str:
        return f"{self.generic_type.go_type_string()}[{self.parameter_type.go_type_string()}]"

    def go_type_string_with_alias(self, alias: str) -> str:
        return (
            f"{self.generic_type.go_type_string_with_alias(alias)}"
            f"[{self.parameter_type.go_type_string_with_alias(alias)}]"
        )

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_generic(self)
        self.generic_type.accept(visitor)
        self.parameter_type.accept(visitor)

    def __str__(self) -> str:
        return self.go_type_string()


@dataclass(frozen=True)
class Ptr:
    """A pointer to another type."""

    field: Basic | Custom | Generic | Ptr | Slice

    @property
    def kind(self) -> Kind:
        return self.field.kind

    def unwrap(self) -> Basic | Custom | Generic | Ptr | Slice:
        return self.field

    def unwraps(self) -> tuple:
        return (self.field,)

    def go_type_string(self) -> str:
        return "*" + self.field.go_type_string()

    def go_type_string_with_alias(self, alias: str) -> str:
        return "*" + self.field.go_type_string_with_alias(alias)

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_ptr(self)
        self.field.accept(visitor)

    def __str__(self) -> str:
        return self.go_type_string()


@dataclass(frozen=True)
class Slice:
    """A slice of another type."""

    field: Basic | Custom | Generic | Ptr | Slice

    @property
    def kind(self) -> Kind:
        return self.field.kind

    def unwrap(self) -> Basic | Custom | Generic | Ptr | Slice:
        return self.field

    def unwraps(self) -> tuple:
        return (self.field,)

    def go_type_string(self) -> str:
        return "[]" + self.field.go_type_string()

    def go_type_string_with_alias(self, alias: str) -> str:
        return "[]" + self.field.go_type_string_with_alias(alias)

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_slice(self)
        self.field.accept(visitor)

    def __str__(self) -> str:
        return self.go_type_string()


def visit_all(field_types: Iterable[Basic | Custom | Generic | Ptr | Slice], visitor: Visitor) -> None:
    """Let ``visitor`` walk each of the field types in turn."""
    for field_type in field_types:
        field_type.accept(visitor)