"""Value rules. Each rule's ``validate`` raises its error when a value fails."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sized
from dataclasses import dataclass, replace
from typing import Any, Union

from .errors import ErrorObject, default_error_object_factory

Number = Union[int, float]

_factory = default_error_object_factory()

ERR_VALUE_NOT_IN = _factory.new_error_object("validation_in_invalid")
ERR_VALUE_IN = _factory.new_error_object("validation_not_in_invalid")
ERR_VALUE_SHOULD_BE_GTE_MIN = _factory.new_error_object("validation_value_gte_min")
ERR_VALUE_SHOULD_BE_LTE_MAX = _factory.new_error_object("validation_value_lte_max")
ERR_VALUE_BETWEEN_REQUIRED = _factory.new_error_object("validation_value_between_required")
ERR_REQUIRED = _factory.new_error_object("required")
ERR_MAX_SLICE_LEN_INVALID = _factory.new_error_object("max_slice_len_invalid")
ERR_MIN_STRING_LEN_INVALID = _factory.new_error_object("min_string_len_invalid")


class FuncRule:
    """A rule made from a function ``func(ctx, value)`` that raises to reject."""

    def __init__(self, func: Callable[[Any, Any], None]) -> None:
        self.func = func

    def validate(self, ctx: Any, value: Any) -> None:
        self.func(ctx, value)


@dataclass(frozen=True)
class InRule:
    """Accepts values in (or, negated, not in) a fixed collection."""

    values: tuple[Any, ...]
    error: BaseException
    negate: bool = False

    def validate(self, ctx: Any, value: Any) -> None:
        if (value in self.values) == self.negate:
            raise self.error


def in_(*values: Any) -> InRule:
    return InRule(values, ERR_VALUE_NOT_IN.with_params({"In": list(values)}))


def not_in(*values: Any) -> InRule:
    return InRule(values, ERR_VALUE_IN.with_params({"In": list(values)}), negate=True)


class _Bound(enum.Enum):
    MIN = enum.auto()
    MAX = enum.auto()
    BETWEEN = enum.auto()


@dataclass(frozen=True)
class MinMaxRule:
    """Compares a number with a lower bound, an upper bound, or both."""

    bound: _Bound
    minimum: Number | None
    maximum: Number | None
    error: BaseException

    def validate(self, ctx: Any, value: Number) -> None:
        if self.bound is _Bound.MAX:
            ok = value <= self.maximum
        elif self.bound is _Bound.MIN:
            ok = value >= self.minimum
        else:
            ok = self.minimum <= value <= self.maximum
        if not ok:
            raise self.error


def min_value(minimum: Number) -> MinMaxRule:
    return MinMaxRule(
        _Bound.MIN, minimum, None, ERR_VALUE_SHOULD_BE_GTE_MIN.with_params({"Min": minimum})
    )


def max_value(maximum: Number) -> MinMaxRule:
    return MinMaxRule(
        _Bound.MAX, None, maximum, ERR_VALUE_SHOULD_BE_LTE_MAX.with_params({"Max": maximum})
    )


def between(minimum: Number, maximum: Number) -> MinMaxRule:
    return MinMaxRule(
        _Bound.BETWEEN,
        minimum,
        maximum,
        ERR_VALUE_BETWEEN_REQUIRED.with_params({"Min": minimum, "Max": maximum}),
    )


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    try:
        zero = type(value)()
    except Exception:
        return False
    try:
        return bool(value == zero)
    except Exception:
        return False


@dataclass(frozen=True)
class RequiredRule:
    """Rejects None and values equal to their type's default."""

    error: BaseException = ERR_REQUIRED

    def validate(self, ctx: Any, value: Any) -> None:
        if _is_zero(value):
            raise self.error

    def with_error(self, error: BaseException) -> RequiredRule:
        return replace(self, error=error)


def required() -> RequiredRule:
    return RequiredRule()


@dataclass(frozen=True)
class RequiredSliceRule:
    """Rejects None and empty sequences."""

    error: BaseException = ERR_REQUIRED

    def validate(self, ctx: Any, value: Sized | None) -> None:
        if not value:
            raise self.error

    def with_error(self, error: BaseException) -> RequiredSliceRule:
        return replace(self, error=error)


def required_slice() -> RequiredSliceRule:
    return RequiredSliceRule()


@dataclass(frozen=True)
class NotNoneRule:
    """Rejects None."""

    error: BaseException = ERR_REQUIRED

    def validate(self, ctx: Any, value: Any) -> None:
        if value is None:
            raise self.error


def not_none() -> NotNoneRule:
    return NotNoneRule()


@dataclass(frozen=True)
class MaxSliceLenRule:
    """Rejects sequences longer than a maximum."""

    max_len: int
    error: BaseException

    def validate(self, ctx: Any, value: Sized | None) -> None:
        if len(value or ()) > self.max_len:
            raise self.error


def max_slice_len(max_len: int) -> MaxSliceLenRule:
    return MaxSliceLenRule(max_len, ERR_MAX_SLICE_LEN_INVALID.with_params({"Len": max_len}))


@dataclass(frozen=True)
class MinStringLengthRule:
    """Rejects strings with fewer characters than a minimum."""

    min_length: int
    error: BaseException

    def validate(self, ctx: Any, value: str) -> None:
        if len(value) < self.min_length:
            raise self.error


def min_string_length(count: int) -> MinStringLengthRule:
    return MinStringLengthRule(count, ERR_MIN_STRING_LEN_INVALID.with_params({"Len": count}))


__all__ = [
    "ErrorObject",
    "FuncRule",
    "InRule",
    "MinMaxRule",
    "RequiredRule",
    "RequiredSliceRule",
    "NotNoneRule",
    "MaxSliceLenRule",
    "MinStringLengthRule",
    "in_",
    "not_in",
    "min_value",
    "max_value",
    "between",
    "required",
    "required_slice",
    "not_none",
    "max_slice_len",
    "min_string_length",
]