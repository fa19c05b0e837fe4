"""
Validator resolution and composite validators for shapeguard.

ensure_validator() turns any spec into a validator; the shape, array and
union validators recurse through it for every field, element and
alternative.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from .accessor import get
from .context import get_options
from .introspect import type_of
from .path import ContextPath, create_context_path
from .types import ErrorResult, Validator, ValidatorSpec
from .validators import (
    create_equality_validator,
    create_instance_of_validator,
    create_type_validator,
)

logger = structlog.get_logger(__name__)


def ensure_validator(spec: ValidatorSpec) -> Validator:
    """
    Resolve a spec to a validator.

    Resolution order:
        str -> type validator ("string", "number", ...)
        class -> instance-of validator
        other callable -> already a validator, pass through
        Mapping -> shape validator
        list of exactly one spec -> array validator of that spec
        anything else -> equality validator

    A bare string is always a type name. Matching a literal string requires
    create_equality_validator() directly.
    """
    if isinstance(spec, str):
        return create_type_validator(spec)

    if isinstance(spec, type):
        return create_instance_of_validator(spec)

    if callable(spec):
        return spec

    if isinstance(spec, Mapping):
        return create_shape_validator(spec)

    if isinstance(spec, list) and len(spec) == 1:
        return create_array_validator(spec[0])

    return create_equality_validator(spec)


def _depth_exceeded(context: ContextPath) -> ErrorResult | None:
    max_depth = get_options().max_depth
    if context.depth < max_depth:
        return None
    logger.warning("max_depth_exceeded", path=context(), max_depth=max_depth)
    return ErrorResult(f"Maximum validation depth of {max_depth} exceeded", context)


def create_shape_validator(field_validators: Mapping[str, ValidatorSpec]) -> Validator:
    """
    Structurally validate an object, field by field.

    Fields are checked in mapping order and the first failure is returned.
    Fields present on the value but not declared are ignored.

    Usage:
        create_shape_validator({
            "name": "string",
            "tags": ["string"],
            "owner": {"id": "number"},
        })
    """
    object_validator = create_type_validator("object")

    def validate_shape(value: Any, context: ContextPath | None = None) -> ErrorResult | None:
        context = context or create_context_path()

        # Checked before the kind so get() never sees None
        if value is None:
            return ErrorResult("Expected value to be a non-null object but received null", context)

        error = object_validator(value, context)
        if error:
            return error

        error = _depth_exceeded(context)
        if error:
            return error

        for key, spec in field_validators.items():
            error = ensure_validator(spec)(get(value, key), context(key))
            if error:
                return error
        return None

    return validate_shape


def create_array_validator(element_spec: ValidatorSpec) -> Validator:
    """
    Validate every item of a list or tuple against one spec.

    Items are checked in index order and the first failure is returned.
    """

    def validate_array(values: Any, context: ContextPath | None = None) -> ErrorResult | None:
        context = context or create_context_path()

        if not isinstance(values, (list, tuple)):
            return ErrorResult(f"Expected type array but received {type_of(values)}", context)

        error = _depth_exceeded(context)
        if error:
            return error

        validator = ensure_validator(element_spec)
        for i, item in enumerate(values):
            error = validator(item, context(i))
            if error:
                return error
        return None

    return validate_array


def create_union_of_validator(validator_specs: Sequence[ValidatorSpec]) -> Validator:
    """
    Validate a value against alternatives; the first one to pass wins.

    When every alternative fails, their errors are combined into a single
    error reported at the union's own path, one "path |> message" line per
    alternative.

    Usage:
        create_union_of_validator([
            {"kind": create_equality_validator("circle"), "radius": "number"},
            {"kind": create_equality_validator("square"), "side": "number"},
        ])
    """
    if isinstance(validator_specs, (str, bytes)) or not isinstance(validator_specs, Sequence):
        raise TypeError(
            f"validator_specs must be a sequence, got {type(validator_specs).__name__}"
        )
    specs = tuple(validator_specs)

    def validate_union(value: Any, context: ContextPath | None = None) -> ErrorResult | None:
        context = context or create_context_path()
        errors: list[ErrorResult] = []

        for spec in specs:
            error = ensure_validator(spec)(value, context)
            if not error:
                return None
            errors.append(error)

        lines = "\n".join(f"{path()} |> {message}" for message, path in errors)
        return ErrorResult(
            f"Expected the value to pass one of the provided validators:\n{lines}",
            context,
        )

    return validate_union
