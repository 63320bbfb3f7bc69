"""Validation error values and their aggregation by field."""

from __future__ import annotations

from collections.abc import (
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    MutableSequence,
    Sequence,
)
from typing import Any

from .templating import MessageTemplate
from .translation import Registry, TranslationError, global_registry


def _chain(err: BaseException | None) -> Iterator[BaseException]:
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        if err.__cause__ is not None:
            err = err.__cause__
        elif not err.__suppress_context__:
            err = err.__context__
        else:
            err = None


def _find_in_chain(err: BaseException | None, cls: type) -> Any:
    return next((e for e in _chain(err) if isinstance(e, cls)), None)


def _json_of(err: BaseException) -> Any:
    to_json = getattr(err, "to_json", None)
    return to_json() if callable(to_json) else {}


class ErrorObject(Exception):
    """An error with a code whose message is rendered from a template."""

    def __init__(self, code: str, template: MessageTemplate, params: Any = None) -> None:
        super().__init__(code)
        self.code = code
        self.template = template
        self.params = params

    def with_params(self, params: Any) -> ErrorObject:
        return ErrorObject(self.code, self.template, params)

    def with_template(self, template: MessageTemplate) -> ErrorObject:
        return ErrorObject(self.code, template, self.params)

    def __str__(self) -> str:
        return self.template.render(self.params)

    def to_json(self) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorObject):
            return NotImplemented
        return (
            self.code == other.code
            and self.template is other.template
            and self.params == other.params
        )

    def __hash__(self) -> int:
        return hash((self.code, id(self.template)))

    def __repr__(self) -> str:
        return f"ErrorObject(code={self.code!r}, params={self.params!r})"


def new_error_object(code: str, message: str) -> ErrorObject:
    """Build an error object from a code and template text."""
    return ErrorObject(code, MessageTemplate(message, "err"))


class ErrorObjectFactory:
    """Creates error objects using templates of a registry's default locale."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def new_error_object(self, code: str) -> ErrorObject:
        try:
            template = self.registry.get_error_template(code, self.registry.default_locale)
        except TranslationError as exc:
            raise TranslationError(f"failed registry get_error_template: {exc}") from exc
        return ErrorObject(code, template)


_DEFAULT_FACTORY = ErrorObjectFactory(global_registry())


def default_error_object_factory() -> ErrorObjectFactory:
    """The factory bound to the global registry as it was at import time."""
    return _DEFAULT_FACTORY


class ErrorSlice(Exception, Sequence):
    """Several errors reported for the same field."""

    def __init__(self, errors: Iterable[BaseException] = ()) -> None:
        items = list(errors)
        super().__init__(*items)
        self._errors = items

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ErrorSlice(self._errors[index])
        return self._errors[index]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorSlice):
            return NotImplemented
        return self._errors == other._errors

    __hash__ = None  # type: ignore[assignment]

    def append_error(self, err: BaseException) -> ErrorSlice:
        """Return a new slice with ``err`` (or its items, if a slice) appended."""
        if isinstance(err, ErrorSlice):
            return ErrorSlice([*self._errors, *err._errors])
        return ErrorSlice([*self._errors, err])

    def __str__(self) -> str:
        return ", ".join(str(err) for err in self._errors)

    def to_json(self) -> list[Any]:
        return [_json_of(err) for err in self._errors]

    def __repr__(self) -> str:
        return f"ErrorSlice({self._errors!r})"


class Errors(Exception, MutableMapping):
    """Validation errors keyed by field name."""

    def __init__(self, errors: Mapping[str, BaseException] | None = None) -> None:
        super().__init__()
        self._errors: dict[str, BaseException] = dict(errors or {})

    def __getitem__(self, key: str) -> BaseException:
        return self._errors[key]

    def __setitem__(self, key: str, value: BaseException) -> None:
        self._errors[key] = value

    def __delitem__(self, key: str) -> None:
        self._errors.pop(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def join(self, other: Mapping[str, BaseException]) -> Errors:
        """Merge ``other`` into these errors in place and return them."""
        for key, value in other.items():
            existing = self._errors.get(key)
            if existing is None:
                self._errors[key] = value
            elif isinstance(existing, ErrorObject):
                if isinstance(value, ErrorObject) and value.code == existing.code:
                    continue
                if isinstance(value, ErrorSlice):
                    self._errors[key] = value.append_error(existing)
                    continue
                self._errors[key] = ErrorSlice([existing, value])
            elif isinstance(existing, ErrorSlice):
                self._errors[key] = existing.append_error(value)
            else:
                self._errors[key] = ErrorSlice([existing, value])
        return self

    def __str__(self) -> str:
        if not self._errors:
            return ""
        parts = []
        for key in sorted(self._errors):
            err = self._errors[key]
            nested = _find_in_chain(err, Errors)
            if nested is not None:
                parts.append(f"{key}: ({nested})")
            else:
                parts.append(f"{key}: {err}")
        return "; ".join(parts) + "."

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, err in self._errors.items():
            to_json = getattr(err, "to_json", None)
            result[key] = to_json() if callable(to_json) else str(err)
        return result

    def __repr__(self) -> str:
        return f"Errors({self._errors!r})"


def is_validation_errors(err: BaseException | None) -> bool:
    """Whether ``err`` or any error it was raised from is an ``Errors``."""
    return _find_in_chain(err, Errors) is not None


class FieldError(Exception):
    """An error attached to a named field."""

    def __init__(self, field: str, error: BaseException) -> None:
        super().__init__(field, error)
        self.field = field
        self.error = error

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"FieldError({self.field!r}, {self.error!r})"


class FieldErrors(Exception, MutableSequence):
    """An ordered list of field errors."""

    def __init__(self, field_errors: Iterable[FieldError] = ()) -> None:
        super().__init__()
        self._items: list[FieldError] = list(field_errors)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return FieldErrors(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __delitem__(self, index) -> None:
        if isinstance(index, slice):
            self._items[index] = []
        else:
            self._items.pop(index)

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: FieldError) -> None:
        self._items.insert(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldErrors):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(str(fe) for fe in self._items)

    def __repr__(self) -> str:
        return f"FieldErrors({self._items!r})"


def _try_join(errs: Errors, err: BaseException) -> Errors:
    if isinstance(err, Errors):
        return errs.join(err)
    return errs


def _merge(first: BaseException, second: BaseException) -> BaseException:
    if isinstance(first, Errors):
        return _try_join(first, second)
    if isinstance(first, ErrorSlice):
        return first.append_error(second)
    if isinstance(second, Errors):
        return _try_join(second, first)
    if isinstance(second, ErrorSlice):
        return ErrorSlice([first, *second])
    return ErrorSlice([first, second])


def field_errors_to_errors(field_errors: Iterable[FieldError]) -> Errors:
    """Group field errors by field name, nesting inner field errors."""
    errs = Errors()
    for field_error in field_errors:
        err = field_error.error
        if isinstance(err, FieldErrors):
            err = field_errors_to_errors(err)
        existing = errs.get(field_error.field)
        if existing is not None:
            errs[field_error.field] = _merge(existing, err)
        else:
            errs[field_error.field] = err
    return errs