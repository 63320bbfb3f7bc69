"""Field rules and struct validation built on value rules."""

from __future__ import annotations

import abc
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .context import ValidationContext, new_from_context
from .errors import (
    ErrorObject,
    FieldError,
    FieldErrors,
    field_errors_to_errors,
)
from .fields import StructField
from .translation import TranslationError


def translate_error(ctx: ValidationContext, err: BaseException) -> BaseException:
    """Render an error object with the template of the context's preferred locale.

    Errors that are not error objects, and codes or locales the registry does
    not know, are returned unchanged.
    """
    if not isinstance(err, ErrorObject):
        return err
    try:
        template = ctx.registry.get_error_template(err.code, ctx.preferred_locale)
    except TranslationError:
        return err
    if template is err.template:
        return err
    return err.with_template(template)


def _field_name(ctx: ValidationContext, struct_field: StructField) -> str:
    return ctx.field_name_getter.get_field_name(struct_field)


class FieldRule(abc.ABC):
    """A check of one part of an object; raises FieldError when it fails."""

    @abc.abstractmethod
    def validate(self, ctx: ValidationContext, obj: Any) -> None:
        """Raise FieldError if ``obj`` fails this rule."""


@dataclass(frozen=True)
class ValueFieldRule(FieldRule):
    """Applies value rules to one field; the first failing rule is reported."""

    struct_field: StructField
    rules: tuple[Any, ...]

    def validate(self, ctx: ValidationContext, obj: Any) -> None:
        value = self.struct_field.extract_value(obj)
        for rule in self.rules:
            try:
                rule.validate(ctx, value)
            except Exception as err:
                raise FieldError(
                    _field_name(ctx, self.struct_field), translate_error(ctx, err)
                ) from None


@dataclass(frozen=True)
class ObjectFieldRule(FieldRule):
    """Applies field rules to a nested object held by a field."""

    struct_field: StructField
    field_rules: tuple[FieldRule, ...]

    def validate(self, ctx: ValidationContext, obj: Any) -> None:
        value = self.struct_field.extract_value(obj)
        errors = FieldErrors()
        for rule in self.field_rules:
            try:
                rule.validate(ctx, value)
            except FieldError as field_error:
                errors.append(field_error)
                if ctx.stop_after_first_error:
                    break
        if errors:
            raise FieldError(_field_name(ctx, self.struct_field), errors)


@dataclass(frozen=True)
class SliceFieldRule(FieldRule):
    """Applies value rules to every item of a sequence held by a field."""

    struct_field: StructField
    rules: tuple[Any, ...]

    def validate(self, ctx: ValidationContext, obj: Any) -> None:
        items = self.struct_field.extract_value(obj) or ()
        errors: list[FieldError] = []
        for rule in self.rules:
            if errors and ctx.stop_after_first_error:
                break
            for index, value in enumerate(items):
                try:
                    rule.validate(ctx, value)
                except Exception as err:
                    errors.append(FieldError(str(index), translate_error(ctx, err)))
                    break
        if errors:
            raise FieldError(
                _field_name(ctx, self.struct_field), field_errors_to_errors(errors)
            )


@dataclass(frozen=True)
class ObjectSliceFieldRule(FieldRule):
    """Applies field rules to every object of a sequence held by a field."""

    struct_field: StructField
    field_rules: tuple[FieldRule, ...]

    def validate(self, ctx: ValidationContext, obj: Any) -> None:
        items = self.struct_field.extract_value(obj) or ()
        errors: list[FieldError] = []
        for rule in self.field_rules:
            if errors and ctx.stop_after_first_error:
                break
            for index, value in enumerate(items):
                try:
                    rule.validate(ctx, value)
                except FieldError as field_error:
                    errors.append(FieldError(str(index), field_error))
                    break
        if errors:
            raise FieldError(
                _field_name(ctx, self.struct_field), field_errors_to_errors(errors)
            )


@dataclass(frozen=True)
class IfRule(FieldRule):
    """Applies field rules only when a predicate holds for the object."""

    predicate: Callable[[Any], bool]
    field_rules: tuple[FieldRule, ...]

    def validate(self, ctx: ValidationContext, obj: Any) -> None:
        if not self.predicate(obj):
            return
        for rule in self.field_rules:
            rule.validate(ctx, obj)


@dataclass(frozen=True)
class IfFieldTypeOfRule(FieldRule):
    """Applies field rules to a field's value only when it is of a given type."""

    type_: type | tuple[type, ...]
    struct_field: StructField
    field_rules: tuple[FieldRule, ...]

    def validate(self, ctx: ValidationContext, obj: Any) -> None:
        value = self.struct_field.extract_value(obj)
        if not isinstance(value, self.type_):
            return
        for rule in self.field_rules:
            rule.validate(ctx, value)


def field(struct_field: StructField, *rules: Any) -> FieldRule:
    return ValueFieldRule(struct_field, rules)


def object_field(struct_field: StructField, *field_rules: FieldRule) -> FieldRule:
    return ObjectFieldRule(struct_field, field_rules)


def slice_field(struct_field: StructField, *rules: Any) -> FieldRule:
    return SliceFieldRule(struct_field, rules)


def object_slice_field(struct_field: StructField, *field_rules: FieldRule) -> FieldRule:
    return ObjectSliceFieldRule(struct_field, field_rules)


def if_(predicate: Callable[[Any], bool], *field_rules: FieldRule) -> FieldRule:
    return IfRule(predicate, field_rules)


def if_field_type_of(
    type_: type | tuple[type, ...], struct_field: StructField, *field_rules: FieldRule
) -> FieldRule:
    return IfFieldTypeOfRule(type_, struct_field, field_rules)


def validate_struct(
    obj: Any,
    *field_rules: FieldRule,
    ctx: Mapping[Any, Any] | ValidationContext | None = None,
) -> None:
    """Validate ``obj``; raise ``Errors`` keyed by field name if any rule fails.

    ``ctx`` is either a validation context or a context mapping it is built from.
    """
    v_ctx = ctx if isinstance(ctx, ValidationContext) else new_from_context(ctx)
    errors: list[FieldError] = []
    for rule in field_rules:
        try:
            rule.validate(v_ctx, obj)
        except FieldError as field_error:
            errors.append(field_error)
            if v_ctx.stop_after_first_error:
                break
    if errors:
        raise field_errors_to_errors(errors)