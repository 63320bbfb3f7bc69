import pytest

from zerovalid.errors import ErrorObjectFactory
from zerovalid.templating import MessageTemplate
from zerovalid.translation import (
    Locale,
    Registry,
    TemplateOverride,
    TranslationError,
    apply_overrides,
    english_locale,
    global_registry,
    locale_from_context,
    locale_to_context,
    new_default_registry,
    registry_from_context,
    registry_to_context,
    russian_locale,
    set_global_registry,
    template_override_from_text,
)


def _locale1():
    return Locale("local1", {"code": MessageTemplate("locale1", "code")})


def _locale2():
    return Locale("local2", {"code": MessageTemplate("locale2", "code")})


def test_set_default_locale_keeps_bound_template():
    registry = Registry(_locale1())
    err = ErrorObjectFactory(registry).new_error_object("code")
    assert str(err) == "locale1"

    registry.default_locale = "locale2"
    assert registry.default_locale == "locale2"
    assert str(err) == "locale1"


def test_new_default_locale_is_used_by_factory():
    registry = Registry(_locale1())
    registry.register_locale(_locale2())
    registry.default_locale = "local2"
    err = ErrorObjectFactory(registry).new_error_object("code")
    assert str(err) == "locale2"


def test_english_templates_render():
    registry = new_default_registry()
    assert registry.default_locale == "en"
    assert registry.get_error_template("required", "en").render(None) == "field is required"
    assert (
        registry.get_error_template("validation_in_invalid", "en").render({"In": [3, 4]})
        == "must be in [3 4]"
    )


def test_russian_locale_registration():
    registry = new_default_registry()
    registry.register_locale(russian_locale())
    template = registry.get_error_template("required", "ru")
    assert template.render(None) == "поле обязательно для заполнения"
    assert registry.default_locale == "en"


def test_unknown_code_and_locale_raise():
    registry = new_default_registry()
    with pytest.raises(TranslationError, match="code missing is not registered"):
        registry.get_error_template("missing", "en")
    with pytest.raises(TranslationError, match="locale fr is not registered"):
        registry.get_error_template("required", "fr")


def test_register_template():
    registry = new_default_registry()
    template = MessageTemplate("custom", "custom")
    registry.register_template("custom_code", "en", template)
    assert registry.get_error_template("custom_code", "en") is template


def test_russian_locale_with_override():
    locale = russian_locale(template_override_from_text("required", "custom"))
    assert locale.name == "ru"
    assert locale.templates["required"].render(None) == "custom"
    assert locale.templates["max_slice_len_invalid"].render({"Len": 2}) == (
        "количество элементов не может быть больше 2"
    )


def test_apply_overrides_replaces_in_place():
    templates = dict(english_locale().templates)
    replacement = MessageTemplate("other", "required")
    apply_overrides(templates, TemplateOverride("required", replacement))
    assert templates["required"] is replacement


def test_context_carries_registry_and_locale():
    registry = new_default_registry()
    base = {}
    ctx = registry_to_context(base, registry)
    ctx = locale_to_context(ctx, "ru")
    assert registry_from_context(ctx) is registry
    assert locale_from_context(ctx) == "ru"
    assert registry_from_context(base) is None
    assert locale_from_context(None) is None


def test_set_global_registry():
    original = global_registry()
    replacement = new_default_registry()
    try:
        set_global_registry(replacement)
        assert global_registry() is replacement
    finally:
        set_global_registry(original)
    assert global_registry() is original