"""
Primitive validators for shapeguard.

Each factory returns a validator function `(value, context=None)` that
returns None when the value passes and an ErrorResult when it does not.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .introspect import KINDS, kind_of, same_value_zero, strict_equals, to_string, type_of
from .path import ContextPath, create_context_path
from .types import ErrorResult, Validator


def create_type_validator(expected_type: str) -> Validator:
    """
    Validate the primitive kind of a value.

    Usage:
        create_type_validator("string")
        create_type_validator("number")

    Raises:
        ValueError: If expected_type is not one of the known kinds
    """
    if expected_type not in KINDS:
        raise ValueError(
            f"Unknown type name {expected_type!r}, expected one of: "
            f"{', '.join(sorted(KINDS))}"
        )

    def validate_type(value: Any, context: ContextPath | None = None) -> ErrorResult | None:
        if kind_of(value) != expected_type:
            return ErrorResult(
                f"Expected type {expected_type} but received {type_of(value)}",
                context or create_context_path(),
            )
        return None

    return validate_type


def create_equality_validator(expected_value: Any) -> Validator:
    """
    Validate strict equality with a literal.

    Uses strict_equals(): no coercion between types and identity for
    non-scalar values, so NaN never equals NaN and [1] never equals [1]
    unless it is the very same list.
    """

    def validate_equality(value: Any, context: ContextPath | None = None) -> ErrorResult | None:
        if not strict_equals(value, expected_value):
            return ErrorResult(
                f"Expected value to equal {to_string(expected_value)} "
                f"but received {to_string(value)}",
                context or create_context_path(),
            )
        return None

    return validate_equality


def create_instance_of_validator(klass: type | tuple[type, ...]) -> Validator:
    """Validate that value is an instance of klass."""
    name = getattr(klass, "__name__", None) or to_string(klass)

    def validate_instance(value: Any, context: ContextPath | None = None) -> ErrorResult | None:
        if not isinstance(value, klass):
            return ErrorResult(
                f"Expected value to be an instance of {name} but received {to_string(value)}",
                context or create_context_path(),
            )
        return None

    return validate_instance


def create_one_of_validator(allowed_values: Sequence[Any]) -> Validator:
    """
    Validate value is one of an allowed set of values.

    Membership uses same_value_zero(), so NaN is found in [NaN].

    Usage:
        create_one_of_validator(["active", "inactive", "pending"])
        create_one_of_validator([1, 2, 3])
    """
    if isinstance(allowed_values, (str, bytes)) or not isinstance(allowed_values, Sequence):
        raise TypeError(
            f"allowed_values must be a sequence, got {type(allowed_values).__name__}"
        )
    allowed = tuple(allowed_values)
    plural = " one of" if len(allowed) > 1 else ""

    def validate_one_of(value: Any, context: ContextPath | None = None) -> ErrorResult | None:
        if not any(same_value_zero(value, candidate) for candidate in allowed):
            rendered = ", ".join(to_string(v) for v in allowed)
            return ErrorResult(
                f"Expected the value to be{plural} {rendered} but received {to_string(value)}",
                context or create_context_path(),
            )
        return None

    return validate_one_of
