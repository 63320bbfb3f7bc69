"""Error message translations and the registry that holds them."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

from .templating import MessageTemplate


class TranslationError(LookupError):
    """No template is registered for a code or a locale."""


@dataclass(frozen=True)
class Locale:
    """A named set of message templates keyed by error code."""

    name: str
    templates: Mapping[str, MessageTemplate] = field(default_factory=dict)


@dataclass(frozen=True)
class TemplateOverride:
    """A template that replaces a locale's template for one code."""

    code: str
    template: MessageTemplate


def template_override_from_text(code: str, text: str) -> TemplateOverride:
    """Build an override from template text."""
    return TemplateOverride(code, MessageTemplate(text, "code"))


def apply_overrides(
    templates: MutableMapping[str, MessageTemplate], *overrides: TemplateOverride
) -> None:
    """Replace templates in place with the given overrides."""
    for override in overrides:
        templates[override.code] = override.template


_ENGLISH_MESSAGES = {
    "required": "field is required",
    "validation_in_invalid": "must be in {{.In}}",
    "validation_value_gte_min": "value must be greater or equal then {{.Min}}",
    "validation_value_lte_max": "value must be less or equal then {{.Max}}",
    "validation_value_between_required": "value bust be between {{.Min}} and {{.Max}}",
    "validation_not_in_invalid": "must not be in {{.In}}",
    "max_slice_len_invalid": "max len should be less {{.Len}}",
    "min_string_len_invalid": "min length of string should be gte {{.Len}}",
}

_RUSSIAN_MESSAGES = {
    "required": "поле обязательно для заполнения",
    "validation_in_invalid": "значение должно быть одним из {{.In}}",
    "validation_value_gte_min": "значение должно быть больше или равно {{.Min}}",
    "validation_value_lte_max": "значение должно быть меньше или равно {{.Max}}",
    "validation_value_between_required": "значение должно быть между {{.Min}} и {{.Max}}",
    "validation_not_in_invalid": "значение не должно быть одним из {{.In}}",
    "max_slice_len_invalid": "количество элементов не может быть больше {{.Len}}",
    "min_string_len_invalid": "в строке должно не менее {{.Len}} символов",
}


def _compile(messages: Mapping[str, str]) -> dict[str, MessageTemplate]:
    return {code: MessageTemplate(text, code) for code, text in messages.items()}


def english_locale() -> Locale:
    """The built-in English locale, named ``en``."""
    return Locale("en", _compile(_ENGLISH_MESSAGES))


def russian_locale(*overrides: TemplateOverride) -> Locale:
    """The built-in Russian locale, named ``ru``, with optional overrides."""
    templates = _compile(_RUSSIAN_MESSAGES)
    apply_overrides(templates, *overrides)
    return Locale("ru", templates)


class Registry:
    """Message templates by error code and locale, with a default locale."""

    def __init__(self, default_locale: Locale) -> None:
        self._templates: dict[str, dict[str, MessageTemplate]] = {}
        self.default_locale: str = default_locale.name
        self.register_locale(default_locale)

    def get_error_template(self, code: str, locale: str) -> MessageTemplate:
        """Return the template for ``code`` in ``locale``; raise TranslationError if absent."""
        by_locale = self._templates.get(code)
        if by_locale is None:
            raise TranslationError(f"code {code} is not registered")
        template = by_locale.get(locale)
        if template is None:
            raise TranslationError(f"locale {locale} is not registered for code {code}")
        return template

    def register_template(self, code: str, locale: str, template: MessageTemplate) -> None:
        self._templates.setdefault(code, {})[locale] = template

    def register_locale(self, locale: Locale) -> None:
        for code, template in locale.templates.items():
            self.register_template(code, locale.name, template)

    def __repr__(self) -> str:
        return f"Registry(default_locale={self.default_locale!r}, codes={len(self._templates)})"


def new_default_registry() -> Registry:
    """A registry holding the English locale as its default."""
    return Registry(english_locale())


_GLOBAL_STATE: dict[str, Registry] = {"registry": new_default_registry()}


def global_registry() -> Registry:
    """The registry used when a context carries none."""
    return _GLOBAL_STATE["registry"]


def set_global_registry(registry: Registry) -> None:
    """Replace the registry returned by :func:`global_registry`."""
    _GLOBAL_STATE["registry"] = registry


class _RegistryKey:
    pass


class _LocaleKey:
    pass


_REGISTRY_KEY = _RegistryKey()
_LOCALE_KEY = _LocaleKey()


def registry_to_context(ctx: Mapping[Any, Any] | None, registry: Registry) -> dict[Any, Any]:
    """Return a new context mapping that carries ``registry``."""
    return {**(ctx or {}), _REGISTRY_KEY: registry}


def registry_from_context(ctx: Mapping[Any, Any] | None) -> Registry | None:
    value = (ctx or {}).get(_REGISTRY_KEY)
    return value if isinstance(value, Registry) else None


def locale_to_context(ctx: Mapping[Any, Any] | None, locale: str) -> dict[Any, Any]:
    """Return a new context mapping that carries the preferred ``locale``."""
    return {**(ctx or {}), _LOCALE_KEY: locale}


def locale_from_context(ctx: Mapping[Any, Any] | None) -> str | None:
    value = (ctx or {}).get(_LOCALE_KEY)
    return value if isinstance(value, str) else None