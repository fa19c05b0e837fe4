from .accessor import get
from .check import TypeCheckError, assert_valid, check, is_valid
from .context import ValidationOptions, get_options, validation_context
from .core import (
    create_array_validator,
    create_shape_validator,
    create_union_of_validator,
    ensure_validator,
)
from .introspect import kind_of, same_value_zero, strict_equals, to_string, type_of
from .path import ContextPath, create_context_path
from .types import ErrorResult, Validator, ValidatorSpec
from .validators import (
    create_equality_validator,
    create_instance_of_validator,
    create_one_of_validator,
    create_type_validator,
)

__all__ = [
    # Entry points
    "check",
    "is_valid",
    "assert_valid",
    "TypeCheckError",
    "ensure_validator",
    # Validators
    "create_type_validator",
    "create_equality_validator",
    "create_instance_of_validator",
    "create_shape_validator",
    "create_array_validator",
    "create_one_of_validator",
    "create_union_of_validator",
    # Paths and results
    "ContextPath",
    "create_context_path",
    "ErrorResult",
    "Validator",
    "ValidatorSpec",
    # Helpers
    "get",
    "kind_of",
    "type_of",
    "to_string",
    "strict_equals",
    "same_value_zero",
    # Configuration
    "ValidationOptions",
    "get_options",
    "validation_context",
]
