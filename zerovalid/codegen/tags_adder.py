"""Adding configured tag names to fields of selected structs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from .matcher import StructMatcher, StructMatcherBuilder
from .model import Struct


@dataclass(frozen=True)
class FieldTags:
    """Tag values to give to every field with a given name."""

    field_name: str
    value_by_tag: Mapping[str, str] = field(default_factory=dict)


class TagsAdder:
    """Adds tag values to the named fields of structs its matcher selects."""

    def __init__(self, struct_matcher: StructMatcher, field_tags: Iterable[FieldTags]) -> None:
        self.struct_matcher = struct_matcher
        self.field_tags_by_name = {item.field_name: item for item in field_tags}

    def is_match_struct(self, struct_name: str) -> bool:
        return self.struct_matcher.match(struct_name)

    def add_tags(self, structs: Sequence[Struct]) -> list[Struct]:
        """The structs with tags added; the given structs are left unchanged."""
        return [
            self._add_tags_to_struct(struct) if self.is_match_struct(struct.name) else struct
            for struct in structs
        ]

    def _add_tags_to_struct(self, struct: Struct) -> Struct:
        fields = []
        for struct_field in struct.fields:
            extra = self.field_tags_by_name.get(struct_field.name)
            if extra is not None:
                struct_field = replace(
                    struct_field, tags={**struct_field.tags, **extra.value_by_tag}
                )
            fields.append(struct_field)
        return replace(struct, fields=fields)


def tags_adder_from_configuration(configuration: Any) -> TagsAdder:
    """A tags adder from an object with ``matches`` and ``field_tags_by_field()``."""
    field_tags = [
        FieldTags(name, dict(tags))
        for name, tags in configuration.field_tags_by_field().items()
    ]
    matcher = StructMatcherBuilder().add_regexp_matches(*configuration.matches).build()
    return TagsAdder(matcher, field_tags)


class MultiTagsAdder:
    """Applies several tags adders one after another."""

    def __init__(self, tags_adders: Iterable[TagsAdder]) -> None:
        self.tags_adders = list(tags_adders)

    def add_tags(self, structs: Sequence[Struct]) -> list[Struct]:
        result = list(structs)
        for tags_adder in self.tags_adders:
            result = tags_adder.add_tags(result)
        return result