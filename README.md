# zerovalid

`zerovalid` validates objects field by field with small, composable rules.
Error messages come from a translation registry, so the same rules can report
in English, Russian or any locale you register. Field names in reported errors
can follow a naming strategy, such as a JSON or proto name, instead of the
field's own name.

## Concepts

- **Fields**: `zerovalid.fields.StructField(name, additional_names, extractor)`
  pairs a field name, optional alternative names keyed by strings such as
  `"json"` or `"proto"`, and a function that reads the value from an object.
  `from_optional` wraps a field so that a `None` object yields `None`.
- **Field-name strategies**: `zerovalid.fields.NameKey` (with the ready-made
  `JSON` and `PROTO` keys) picks the alternative name under one key, falling
  back to the field name. `GetterStrategy(*keys)` tries several keys in turn.
- **Value rules**: `zerovalid.rules` provides `required()`, `required_slice()`,
  `not_none()`, `in_(...)`, `not_in(...)`, `min_value(...)`, `max_value(...)`,
  `between(...)`, `max_slice_len(...)`, `min_string_length(...)` and
  `FuncRule(func)` for your own checks. A rule's `validate(ctx, value)` raises
  its error when the value fails. `required()` rejects `None` and values equal
  to their type's default (`0`, `""`, ...); `RequiredRule.with_error` and
  `RequiredSliceRule.with_error` swap in another error.
- **Field rules**: `zerovalid.validate` binds rules to fields: `field`,
  `object_field` for nested objects, `slice_field` and `object_slice_field` for
  sequences (failures are keyed by item index), and `if_` / `if_field_type_of`
  for conditional checks. Only the first failing value rule of a `field` is
  reported.
- **Running validation**: `validate_struct(obj, *field_rules, ctx=None)`
  applies field rules and, if any fail, raises `zerovalid.errors.Errors`, a
  mapping of field name to error. Nested failures become nested `Errors`.
  `Errors.to_json()` gives a JSON-ready dictionary.
- **Context**: `zerovalid.context.ValidationContext` holds the translation
  registry, the preferred locale, the field-name strategy and whether to stop
  after the first failing field rule (the default). `validate_struct` accepts
  either a `ValidationContext` or a context mapping built with
  `zerovalid.context.to_context`, `zerovalid.translation.registry_to_context`,
  `zerovalid.translation.locale_to_context` or
  `zerovalid.fields.getter_to_context`.

## Example

```python
from dataclasses import dataclass

from zerovalid import rules
from zerovalid.context import ValidationContext
from zerovalid.errors import Errors
from zerovalid.fields import JSON, StructField
from zerovalid.translation import global_registry
from zerovalid.validate import field, validate_struct


@dataclass
class Todo:
    id: int
    title: str


TODO_ID = StructField("ID", {"json": "id"}, lambda todo: todo.id)
TODO_TITLE = StructField("Title", {"json": "title"}, lambda todo: todo.title)

TODO_RULES = [
    field(TODO_ID, rules.required(), rules.between(1, 1000)),
    field(TODO_TITLE, rules.min_string_length(3)),
]

try:
    validate_struct(Todo(id=0, title="ok"), *TODO_RULES)
except Errors as errors:
    print(errors)  # ID: field is required.

ctx = ValidationContext(
    global_registry(), "en", field_name_getter=JSON, stop_after_first_error=False
)
try:
    validate_struct(Todo(id=0, title="ok"), *TODO_RULES, ctx=ctx)
except Errors as errors:
    print(errors.to_json())
    # {'id': 'field is required', 'title': 'min length of string should be gte 3'}
```

## Translations

Messages come from a `zerovalid.translation.Registry`; the one returned by
`global_registry()` holds the English locale (`english_locale()`) as its
default. Add Russian messages with `registry.register_locale(russian_locale())`
and validate with a context whose preferred locale is `"ru"`. To replace single
messages, pass overrides built with `template_override_from_text(code, text)`
to `russian_locale(...)`, or call `register_template` directly. Templates use
`{{.Name}}` placeholders filled from the error's parameters
(`zerovalid.templating.MessageTemplate`).

## Reusable validators

`zerovalid.validators` stores validators by name so their rule lists are built
once and shared: subclass `Validator`, implement `name()` and `rules()`, then
call `get_or_init_validator_rules(YourValidator)` against the global store, or
keep your own `DefaultMapStore` / `ConcurrentMapStore` and use
`init_validator_in_store`, `get_validator_rules_from_store` and
`get_or_init_validator_rules_from_store`.

## Code-generation helpers

`zerovalid.codegen` holds building blocks for describing structs whose field
extractors are to be generated:

- `field_types`: Go type models (`Basic`, `Custom`, `Generic`, `Ptr`, `Slice`)
  that render their Go type strings and accept visitors.
- `model`: `Struct`, `Field`, `Import`, `TypeAlias` and `get_used_imports`.
- `matcher`: `StructMatcherBuilder` combining include and exclude regular
  expressions into a struct-name matcher.
- `tags`: `TagParser` and `lookup_struct_tag` for `key:"value"` struct tags.
- `tags_adder`: `TagsAdder` / `MultiTagsAdder` adding configured tag values to
  fields of matching structs.
- `config`: reading `.zerovalid.yaml` (`read_config`, `get_default_config`)
  and locating the enclosing `go.mod` (`find_go_module`).

## What this package does not do

There is no command-line tool. The code-generation helpers model structs,
types, tags and settings, but the package neither reads Go or protobuf source
files nor writes generated extractor files; `StructField` definitions are
written by hand.