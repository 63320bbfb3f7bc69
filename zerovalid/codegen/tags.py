"""Reading names from Go struct tags."""

from __future__ import annotations

import re
from collections.abc import Callable

_TAG_ITEM = re.compile(r' *([^\x00-\x20:"\x7f]+):"((?:[^"\\]|\\.)*)"', re.DOTALL)

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}

_ESCAPE = re.compile(
    r"\\(?:([abfnrtv\\\"])|x([0-9a-fA-F]{2})|([0-7]{3})"
    r"|u([0-9a-fA-F]{4})|U([0-9a-fA-F]{8})|(.?))",
    re.DOTALL,
)


def _decode_escape(match: re.Match) -> str:
    simple, hex2, octal, hex4, hex8, invalid = match.groups()
    if invalid is not None:
        raise ValueError(f"invalid escape {match.group(0)!r}")
    if simple is not None:
        return _SIMPLE_ESCAPES[simple]
    if octal is not None:
        code = int(octal, 8)
        if code > 0xFF:
            raise ValueError(f"octal escape out of range {match.group(0)!r}")
        return chr(code)
    return chr(int(hex2 or hex4 or hex8, 16))


def _unquote(body: str) -> str | None:
    if "\n" in body:
        return None
    try:
        return _ESCAPE.sub(_decode_escape, body)
    except ValueError:
        return None


def lookup_struct_tag(tag: str, key: str) -> str | None:
    """The value stored under ``key`` in a conventional ``key:"value"`` tag string."""
    position = 0
    while position < len(tag):
        item = _TAG_ITEM.match(tag, position)
        if item is None:
            return None
        position = item.end()
        if item.group(1) == key:
            return _unquote(item.group(2))
    return None


class TagParser:
    """Extracts the names given by a fixed set of tag keys."""

    def __init__(self, *known_tags: str) -> None:
        self.known_tags = known_tags

    def parse_tag(self, tag: str) -> dict[str, str] | None:
        """Names by tag key, options after a comma dropped; None if none found."""
        parsed: dict[str, str] = {}
        for key in self.known_tags:
            value = lookup_struct_tag(tag, key)
            if not value:
                continue
            parsed[key] = value.partition(",")[0]
        return parsed or None

    __call__: Callable[[TagParser, str], dict[str, str] | None] = parse_tag