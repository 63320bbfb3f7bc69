"""Message templates with ``{{.Field}}`` placeholders."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

_ACTION = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
_FIELD_PATH = re.compile(r"\.(?:[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)?")
_MISSING = object()

NO_VALUE = "<no value>"


def format_value(value: Any) -> str:
    """Render a value the way message parameters are shown to users."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        try:
            keys = sorted(value)
        except TypeError:
            keys = list(value)
        body = " ".join(f"{format_value(k)}:{format_value(value[k])}" for k in keys)
        return f"map[{body}]"
    if isinstance(value, (list, tuple, set, frozenset, bytes, bytearray)):
        return "[" + " ".join(format_value(item) for item in value) + "]"
    return str(value)


def _lookup(data: Any, key: str) -> Any:
    if data is None:
        return _MISSING
    if isinstance(data, Mapping):
        return data.get(key, _MISSING)
    return getattr(data, key, _MISSING)


class MessageTemplate:
    """A parsed message whose ``{{.Name}}`` actions are filled from parameters."""

    def __init__(self, text: str, name: str = "") -> None:
        self.text = text
        self.name = name
        self._parts = self._parse(text, name)

    @staticmethod
    def _parse(text: str, name: str) -> tuple[str | tuple[str, ...], ...]:
        parts: list[str | tuple[str, ...]] = []
        position = 0
        for match in _ACTION.finditer(text):
            literal = text[position:match.start()]
            if literal:
                parts.append(literal)
            action = match.group(1).strip()
            if not _FIELD_PATH.fullmatch(action):
                raise ValueError(f"template {name!r}: unsupported action {action!r}")
            parts.append(tuple(action[1:].split(".")) if len(action) > 1 else ())
            position = match.end()
        tail = text[position:]
        if "{{" in tail:
            raise ValueError(f"template {name!r}: unclosed action")
        if tail:
            parts.append(tail)
        return tuple(parts)

    def render(self, params: Any = None) -> str:
        """Fill the template from ``params`` (a mapping or an object with attributes)."""
        return "".join(
            part if isinstance(part, str) else self._resolve(params, part)
            for part in self._parts
        )

    @staticmethod
    def _resolve(params: Any, path: tuple[str, ...]) -> str:
        if not path and params is None:
            return NO_VALUE
        value = params
        for key in path:
            value = _lookup(value, key)
            if value is _MISSING:
                return NO_VALUE
        return format_value(value)

    def __repr__(self) -> str:
        return f"MessageTemplate({self.text!r}, name={self.name!r})"