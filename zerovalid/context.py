"""The settings a validation run works with."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .fields import NameKey, getter_from_context
from .translation import (
    Registry,
    global_registry,
    locale_from_context,
    registry_from_context,
)

DEFAULT_FIELD_NAME_KEY = NameKey("defaultFieldNameKey")


@dataclass(frozen=True)
class ValidationContext:
    """Registry, preferred locale, field naming and error policy for validation."""

    registry: Registry
    preferred_locale: str
    field_name_getter: Any = DEFAULT_FIELD_NAME_KEY
    stop_after_first_error: bool = True


class _ValidationContextKey:
    pass


_CONTEXT_KEY = _ValidationContextKey()


def to_context(
    ctx: Mapping[Any, Any] | None, validation_context: ValidationContext
) -> dict[Any, Any]:
    """Return a new context mapping that carries ``validation_context``."""
    return {**(ctx or {}), _CONTEXT_KEY: validation_context}


def from_context(ctx: Mapping[Any, Any] | None) -> ValidationContext | None:
    value = (ctx or {}).get(_CONTEXT_KEY)
    return value if isinstance(value, ValidationContext) else None


def new_from_context(ctx: Mapping[Any, Any] | None = None) -> ValidationContext:
    """The validation context stored in ``ctx``, or one built from its other values."""
    stored = from_context(ctx)
    if stored is not None:
        return stored

    registry = registry_from_context(ctx)
    if registry is None:
        registry = global_registry()

    locale = locale_from_context(ctx)
    if locale is None:
        locale = registry.default_locale

    getter = getter_from_context(ctx)
    if getter is None:
        getter = DEFAULT_FIELD_NAME_KEY

    return ValidationContext(
        registry=registry,
        preferred_locale=locale,
        field_name_getter=getter,
        stop_after_first_error=True,
    )