from __future__ import annotations

import threading

import pytest

from zerovalid.errors import Errors
from zerovalid.fields import StructField
from zerovalid.rules import required
from zerovalid.validate import field, validate_struct
from zerovalid.validators import (
    ConcurrentMapStore,
    DefaultMapStore,
    Validator,
    ValidatorWrapper,
    get_or_init_validator_rules,
    get_or_init_validator_rules_from_store,
    get_validator_rules,
    get_validator_rules_from_store,
    global_map_store,
    init_validator_in_store,
    init_validator_rules,
    wrap,
)

SOME_FIELD = StructField("some field", None, lambda s: s)


class RequiredStringValidator(Validator):
    def name(self):
        return "validator"

    def rules(self):
        return [field(SOME_FIELD, required())]


class RequiredStringValidatorTwo(Validator):
    def name(self):
        return "validatorTwo"

    def rules(self):
        return [field(SOME_FIELD, required())]


class CountingValidator(Validator):
    def __init__(self):
        self.calls = 0

    def name(self):
        return "counting"

    def rules(self):
        self.calls += 1
        return [field(SOME_FIELD, required())]


class GlobalInitValidator(Validator):
    def name(self):
        return "global-init-validator"

    def rules(self):
        return [field(SOME_FIELD, required())]


class GlobalLazyValidator(Validator):
    def name(self):
        return "global-lazy-validator"

    def rules(self):
        return [field(SOME_FIELD, required())]


def test_init_and_get_from_default_store():
    store = DefaultMapStore()
    init_validator_in_store(store, RequiredStringValidator())
    rules = get_validator_rules_from_store(store, RequiredStringValidator)
    assert len(rules) == 1
    assert isinstance(store.get("validator"), ValidatorWrapper)
    with pytest.raises(Errors) as exc:
        validate_struct("", *rules)
    assert list(exc.value) == ["some field"]
    assert validate_struct("value", *rules) is None


def test_get_missing_validator_raises():
    store = DefaultMapStore()
    init_validator_in_store(store, RequiredStringValidator())
    with pytest.raises(LookupError, match="no validator found for validatorTwo"):
        get_validator_rules_from_store(store, RequiredStringValidatorTwo)


def test_wrapper_builds_rules_once():
    validator = CountingValidator()
    wrapper = wrap(validator)
    first = wrapper.rules()
    second = wrapper.rules()
    assert first is second
    assert validator.calls == 1
    assert wrapper.name() == "counting"


def test_wrapper_builds_rules_once_across_threads():
    validator = CountingValidator()
    wrapper = ValidatorWrapper(validator)
    results = []
    threads = [threading.Thread(target=lambda: results.append(wrapper.rules())) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert validator.calls == 1
    assert all(result is results[0] for result in results)


def test_get_or_init_stores_new_instance():
    store = DefaultMapStore()
    rules = get_or_init_validator_rules_from_store(store, RequiredStringValidatorTwo)
    assert len(rules) == 1
    assert isinstance(store.get("validatorTwo"), RequiredStringValidatorTwo)
    assert len(store.all()) == 1


def test_get_or_init_uses_stored_validator():
    store = DefaultMapStore()
    init_validator_in_store(store, RequiredStringValidator())
    stored = store.get("validator")
    rules = get_or_init_validator_rules_from_store(store, RequiredStringValidator)
    assert rules is stored.rules()
    assert store.get("validator") is stored


def test_global_store_init_and_get():
    init_validator_rules(GlobalInitValidator())
    rules = get_validator_rules(GlobalInitValidator)
    assert len(rules) == 1
    assert isinstance(global_map_store().get("global-init-validator"), ValidatorWrapper)


def test_global_store_lazy_init():
    rules = get_or_init_validator_rules(GlobalLazyValidator)
    assert len(rules) == 1
    assert isinstance(global_map_store().get("global-lazy-validator"), GlobalLazyValidator)


def test_concurrent_store_round_trip():
    store = ConcurrentMapStore()
    assert store.get("") is None
    store.set("key", 42)
    assert store.get("key") == 42


def test_default_store_get_and_all():
    store = DefaultMapStore()
    assert store.get("") is None
    store.set("a", 1)
    store.set("b", 2)
    assert sorted(store.all()) == [1, 2]