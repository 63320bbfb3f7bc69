"""Named validators and stores that keep their rules for reuse."""

from __future__ import annotations

import abc
import threading
from collections.abc import Sequence
from typing import Any

from .validate import FieldRule


class Validator(abc.ABC):
    """A named set of field rules."""

    @abc.abstractmethod
    def name(self) -> str:
        """The key the validator is stored under."""

    @abc.abstractmethod
    def rules(self) -> Sequence[FieldRule]:
        """The field rules of this validator."""


class ValidatorWrapper(Validator):
    """Wraps a validator and builds its rules only once."""

    def __init__(self, validator: Validator) -> None:
        self.validator = validator
        self._rules: Sequence[FieldRule] | None = None
        self._lock = threading.Lock()

    def name(self) -> str:
        return self.validator.name()

    def rules(self) -> Sequence[FieldRule]:
        if self._rules is None:
            with self._lock:
                if self._rules is None:
                    self._rules = self.validator.rules()
        return self._rules

    def __repr__(self) -> str:
        return f"ValidatorWrapper({self.validator!r})"


def wrap(validator: Validator) -> Validator:
    return ValidatorWrapper(validator)


class ConcurrentMapStore:
    """A store safe for concurrent reads and writes."""

    def __init__(self) -> None:
        self._store: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any:
        with self._lock:
            return self._store.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._store[key] = value


class DefaultMapStore:
    """A plain store; not meant for concurrent writes."""

    def __init__(self) -> None:
        self._store: dict[str, Any] = {}

    def get(self, key: str) -> Any:
        return self._store.get(key)

    def set(self, key: str, value: Any) -> None:
        self._store[key] = value

    def all(self) -> list[Any]:
        return list(self._store.values())


_global_map_store = ConcurrentMapStore()


def global_map_store() -> ConcurrentMapStore:
    return _global_map_store


def _validator_name(validator_cls: type[Validator]) -> str:
    return validator_cls().name()


def _is_validator(value: Any) -> bool:
    return value is not None and callable(getattr(value, "rules", None))


def get_validator_rules_from_store(store: Any, validator_cls: type[Validator]) -> Sequence[FieldRule]:
    """Rules of the stored validator; raise LookupError if none is stored."""
    name = _validator_name(validator_cls)
    stored = store.get(name)
    if stored is None:
        raise LookupError("no validator found for " + name)
    return stored.rules()


def init_validator_in_store(store: Any, validator: Validator) -> None:
    """Store ``validator`` wrapped so that its rules are built once."""
    store.set(validator.name(), wrap(validator))


def get_or_init_validator_rules_from_store(
    store: Any, validator_cls: type[Validator]
) -> Sequence[FieldRule]:
    """Rules of the stored validator, storing a new instance first if needed."""
    name = _validator_name(validator_cls)
    stored = store.get(name)
    if not _is_validator(stored):
        stored = validator_cls()
        store.set(name, stored)
    return stored.rules()


def get_validator_rules(validator_cls: type[Validator]) -> Sequence[FieldRule]:
    return get_or_init_validator_rules_from_store(_global_map_store, validator_cls)


def init_validator_rules(validator: Validator) -> None:
    init_validator_in_store(_global_map_store, validator)


def get_or_init_validator_rules(validator_cls: type[Validator]) -> Sequence[FieldRule]:
    return get_or_init_validator_rules_from_store(_global_map_store, validator_cls)