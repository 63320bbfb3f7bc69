import pytest

from zerovalid.templating import MessageTemplate, format_value


def test_render_without_actions_returns_text():
    template = MessageTemplate("field is required", "required")
    assert template.render(None) == "field is required"
    assert template.render({"Anything": 1}) == "field is required"


def test_render_list_parameter():
    template = MessageTemplate("must be in {{.In}}", "validation_in_invalid")
    assert template.render({"In": [3, 4]}) == "must be in [3 4]"


def test_mapping_and_attribute_params_agree():
    class Params:
        Min = 5
        Max = 10

    template = MessageTemplate("between {{.Min}} and {{.Max}}", "t")
    assert template.render(Params()) == template.render({"Min": 5, "Max": 10})


def test_missing_key_renders_no_value():
    template = MessageTemplate("x {{.Len}}", "t")
    assert template.render({}) == "x <no value>"
    assert template.render(None) == template.render({})


def test_dotted_path_and_string_value():
    template = MessageTemplate("{{.A.B}}", "t")
    assert template.render({"A": {"B": "inner"}}) == "inner"


def test_template_is_reusable():
    template = MessageTemplate("min {{ .Len }}", "t")
    first = template.render({"Len": 2})
    assert template.render({"Len": 2}) == first
    assert first.startswith("min ")


@pytest.mark.parametrize("text", ["{{if .A}}yes{{end}}", "{{.A", "{{printf}}"])
def test_unsupported_template_raises(text):
    with pytest.raises(ValueError):
        MessageTemplate(text, "bad")


def test_format_value_string_is_identity():
    assert format_value("abc") == "abc"


def test_format_value_bool():
    assert format_value(True) == "true"


def test_format_value_integral_float_matches_int():
    assert format_value(3.0) == format_value(3)


def test_format_value_sequences_agree():
    assert format_value([1, 2]) == format_value((1, 2))