"""
Top-level entry points: check(), is_valid() and assert_valid().
"""

from __future__ import annotations

from typing import Any

import structlog

from .core import ensure_validator
from .path import create_context_path
from .types import ErrorResult, ValidatorSpec

logger = structlog.get_logger(__name__)


class TypeCheckError(TypeError):
    """Raised by assert_valid() when a value does not conform to its spec."""

    def __init__(self, error: ErrorResult):
        self.error = error
        super().__init__(str(error))

    @property
    def path(self) -> str:
        return self.error.path


def check(value: Any, spec: ValidatorSpec, *, root: str = "") -> ErrorResult | None:
    """
    Validate a value against a spec.

    Args:
        value: The value to validate; never modified
        spec: Type name, class, validator, shape mapping, [element spec] or literal
        root: Path prefix for reported errors (e.g. the name of the field
            holding the value)

    Returns:
        None if the value conforms
        ErrorResult(message, context) for the first mismatch found

    Usage:
        spec = {
            "name": "string",
            "tags": ["string"],
            "status": create_one_of_validator(["active", "archived"]),
        }
        error = check({"name": "Ada", "tags": ["x", 1]}, spec)
        error.path     # "tags.1"
        error.message  # "Expected type string but received number"
    """
    error = ensure_validator(spec)(value, create_context_path(root))
    if error:
        logger.debug("value_rejected", path=error.path, message=error.message)
    return error


def is_valid(value: Any, spec: ValidatorSpec) -> bool:
    """Return True if value conforms to spec."""
    return check(value, spec) is None


def assert_valid(value: Any, spec: ValidatorSpec, *, root: str = "") -> None:
    """
    Like check(), but raise instead of returning the error.

    Raises:
        TypeCheckError: If the value does not conform
    """
    error = check(value, spec, root=root)
    if error:
        raise TypeCheckError(error)
