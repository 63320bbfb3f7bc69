from dataclasses import dataclass, field

from zerovalid.codegen.field_types import Basic
from zerovalid.codegen.matcher import AlwaysTrueMatcher, StructMatcherBuilder
from zerovalid.codegen.model import Field, Struct
from zerovalid.codegen.tags_adder import (
    FieldTags,
    MultiTagsAdder,
    TagsAdder,
    tags_adder_from_configuration,
)


def _structs():
    return [
        Struct("CreateRequest", [Field("ID", Basic.UINT64, {"json": "id"}), Field("Name", Basic.STRING)]),
        Struct("Response", [Field("ID", Basic.UINT64)]),
    ]


def test_tags_added_only_to_matching_structs():
    adder = TagsAdder(
        StructMatcherBuilder().add_regexp_matches("Request").build(),
        [FieldTags("ID", {"ru": "Идентификатор"})],
    )
    result = adder.add_tags(_structs())
    assert result[0].fields[0].tags == {"json": "id", "ru": "Идентификатор"}
    assert result[0].fields[1].tags == {}
    assert result[1].fields[0].tags == {}


def test_original_structs_unchanged():
    structs = _structs()
    TagsAdder(AlwaysTrueMatcher(), [FieldTags("ID", {"ru": "x"})]).add_tags(structs)
    assert structs[0].fields[0].tags == {"json": "id"}


def test_is_match_struct():
    adder = TagsAdder(StructMatcherBuilder().add_regexp_matches("Request").build(), [])
    assert adder.is_match_struct("CreateRequest")
    assert not adder.is_match_struct("Response")


def test_multi_tags_adder_applies_in_order():
    first = TagsAdder(AlwaysTrueMatcher(), [FieldTags("ID", {"ru": "first"})])
    second = TagsAdder(AlwaysTrueMatcher(), [FieldTags("ID", {"ru": "second", "proto": "id"})])
    result = MultiTagsAdder([first, second]).add_tags(_structs())
    assert result[1].fields[0].tags == {"ru": "second", "proto": "id"}


@dataclass
class _Configuration:
    matches: list = field(default_factory=list)
    tags: dict = field(default_factory=dict)

    def field_tags_by_field(self):
        return self.tags


def test_from_configuration():
    adder = tags_adder_from_configuration(
        _Configuration(["Response"], {"ID": {"ru": "Номер"}})
    )
    result = adder.add_tags(_structs())
    assert result[1].fields[0].tags == {"ru": "Номер"}
    assert result[0].fields[0].tags == {"json": "id"}


def test_from_configuration_without_matches_selects_all():
    adder = tags_adder_from_configuration(_Configuration([], {"Name": {"proto": "name"}}))
    assert adder.add_tags(_structs())[0].fields[1].tags == {"proto": "name"}