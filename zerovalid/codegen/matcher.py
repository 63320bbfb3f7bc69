"""Selecting structs by name with include and exclude patterns."""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass


class StructMatcher(abc.ABC):
    """Decides whether a struct is selected."""

    @abc.abstractmethod
    def match(self, struct_name: str) -> bool:
        """Whether the struct called ``struct_name`` is selected."""


class RegexMatcher(StructMatcher):
    """Selects names in which the pattern matches anywhere."""

    def __init__(self, pattern: str) -> None:
        self.regex = re.compile(pattern)

    def match(self, struct_name: str) -> bool:
        return self.regex.search(struct_name) is not None

    def __repr__(self) -> str:
        return f"RegexMatcher({self.regex.pattern!r})"


class RegexExcluder(StructMatcher):
    """Selects names in which the pattern matches nowhere."""

    def __init__(self, pattern: str) -> None:
        self.regex = re.compile(pattern)

    def match(self, struct_name: str) -> bool:
        return self.regex.search(struct_name) is None

    def __repr__(self) -> str:
        return f"RegexExcluder({self.regex.pattern!r})"


class AlwaysTrueMatcher(StructMatcher):
    """Selects every struct."""

    def match(self, struct_name: str) -> bool:
        return True


@dataclass(frozen=True)
class AllMatcher(StructMatcher):
    """Selects a struct only if every one of its matchers does."""

    matchers: tuple[StructMatcher, ...]

    def match(self, struct_name: str) -> bool:
        return all(matcher.match(struct_name) for matcher in self.matchers)


class StructMatcherBuilder:
    """Collects include and exclude patterns into one matcher."""

    def __init__(self) -> None:
        self._matches: list[str] = []
        self._excludes: list[str] = []

    def add_regexp_matches(self, *patterns: str) -> StructMatcherBuilder:
        self._matches.extend(patterns)
        return self

    def add_regexp_excludes(self, *patterns: str) -> StructMatcherBuilder:
        self._excludes.extend(patterns)
        return self

    def build(self) -> StructMatcher:
        """A matcher for names matching any include and no exclude pattern."""
        include = "|".join(self._matches)
        exclude = "|".join(self._excludes)
        matcher = RegexMatcher(include) if include else AlwaysTrueMatcher()
        excluder = RegexExcluder(exclude) if exclude else AlwaysTrueMatcher()
        return AllMatcher((matcher, excluder))