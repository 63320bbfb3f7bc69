"""Parsed structs, their fields and the imports they need."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .field_types import Basic, Custom, Generic, Ptr, Slice, Visitor, _path_base


@dataclass(frozen=True)
class Import:
    """An import path with an optional alias."""

    path: str
    alias: str = ""

    def used_package_name(self) -> str:
        """The alias if set, otherwise the last element of the path."""
        return self.alias or _path_base(self.path)


@dataclass
class Field:
    """A struct field with its type and the names given by its tags."""

    name: str
    type: Basic | Custom | Generic | Ptr | Slice
    tags: dict[str, str] = field(default_factory=dict)


@dataclass
class Struct:
    """A struct and its fields in declaration order."""

    name: str
    fields: list[Field] = field(default_factory=list)


@dataclass(frozen=True)
class TypeAlias:
    """An exported name that refers to another type."""

    name: str
    to: str


class _ImportCollector(Visitor):
    def __init__(self) -> None:
        self.imports: dict[Import, None] = {}

    def visit_custom(self, custom: Custom) -> None:
        if custom.pkg_name or custom.pkg_path:
            self.imports.setdefault(Import(custom.pkg_path, custom.pkg_name), None)


def get_used_imports(structs: Iterable[Struct]) -> list[Import]:
    """Imports of the packages the fields' types come from, first use first."""
    collector = _ImportCollector()
    for struct in structs:
        for struct_field in struct.fields:
            struct_field.type.accept(collector)
    return list(collector.imports)