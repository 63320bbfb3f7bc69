"""Named struct fields with value extractors and field-name lookup strategies."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

T = TypeVar("T")
V = TypeVar("V")


class StructField(Generic[T, V]):
    """A field of some object: its name, alternative names and how to read it."""

    def __init__(
        self,
        name: str,
        additional_names: Mapping[str, str] | None,
        extractor: Callable[[T], V],
    ) -> None:
        self.name = name
        self.additional_names: dict[str, str] = dict(additional_names or {})
        self._extractor = extractor

    def get_additional_name(self, key: str) -> str:
        """The name registered under ``key``, or the field's own name."""
        return self.additional_names.get(key, self.name)

    def try_get_additional_name(self, key: str) -> str | None:
        """The name registered under ``key``, or None if there is none."""
        return self.additional_names.get(key)

    def extract_value(self, obj: T) -> V:
        return self._extractor(obj)

    def __repr__(self) -> str:
        return f"StructField({self.name!r}, {self.additional_names!r})"


def from_optional(struct_field: StructField[T, V]) -> StructField[T | None, V | None]:
    """A field that yields None when the object itself is None."""

    def extract(obj: T | None) -> V | None:
        if obj is None:
            return None
        return struct_field.extract_value(obj)

    return StructField(struct_field.name, struct_field.additional_names, extract)


class NameKey(str):
    """A key under which a field's alternative name is looked up."""

    def get_field_name(self, struct_field: Any) -> str:
        return struct_field.get_additional_name(str(self))


PROTO = NameKey("proto")
JSON = NameKey("json")


class GetterStrategy:
    """Picks the first alternative name found among several keys."""

    def __init__(self, *keys: str) -> None:
        self.keys = tuple(str(key) for key in keys)

    def get_field_name(self, struct_field: Any) -> str:
        for key in self.keys:
            name = struct_field.try_get_additional_name(key)
            if name is not None:
                return name
        return struct_field.name

    def __repr__(self) -> str:
        return f"GetterStrategy{self.keys!r}"


class _GetterKey:
    pass


_GETTER_KEY = _GetterKey()


def getter_to_context(ctx: Mapping[Any, Any] | None, getter: Any) -> dict[Any, Any]:
    """Return a new context mapping that carries a field-name getter."""
    return {**(ctx or {}), _GETTER_KEY: getter}


def getter_from_context(ctx: Mapping[Any, Any] | None) -> Any:
    """The field-name getter carried by ``ctx``, or None."""
    value = (ctx or {}).get(_GETTER_KEY)
    if value is not None and callable(getattr(value, "get_field_name", None)):
        return value
    return None