from zerovalid.context import (
    DEFAULT_FIELD_NAME_KEY,
    ValidationContext,
    from_context,
    new_from_context,
    to_context,
)
from zerovalid.fields import PROTO, GetterStrategy, getter_to_context
from zerovalid.translation import (
    global_registry,
    locale_to_context,
    new_default_registry,
    registry_to_context,
)


def test_defaults_from_empty_context():
    vctx = new_from_context({})
    assert vctx.registry is global_registry()
    assert vctx.preferred_locale == global_registry().default_locale
    assert vctx.field_name_getter == DEFAULT_FIELD_NAME_KEY
    assert vctx.stop_after_first_error is True


def test_none_context_uses_defaults():
    vctx = new_from_context(None)
    assert vctx.registry is global_registry()


def test_stored_context_is_returned():
    stored = ValidationContext(
        new_default_registry(), "ru", PROTO, stop_after_first_error=False
    )
    ctx = to_context({}, stored)
    assert from_context(ctx) is stored
    assert new_from_context(ctx) is stored


def test_from_context_missing():
    assert from_context({}) is None
    assert from_context(None) is None


def test_values_taken_from_context():
    registry = new_default_registry()
    getter = GetterStrategy("ru", PROTO)
    ctx = registry_to_context({}, registry)
    ctx = locale_to_context(ctx, "ru")
    ctx = getter_to_context(ctx, getter)
    vctx = new_from_context(ctx)
    assert vctx.registry is registry
    assert vctx.preferred_locale == "ru"
    assert vctx.field_name_getter is getter


def test_locale_defaults_to_registry_default():
    registry = new_default_registry()
    registry.default_locale = "ru"
    vctx = new_from_context(registry_to_context(None, registry))
    assert vctx.preferred_locale == "ru"


def test_constructor_defaults():
    registry = new_default_registry()
    vctx = ValidationContext(registry, "en")
    assert vctx.field_name_getter == DEFAULT_FIELD_NAME_KEY
    assert vctx.stop_after_first_error is True