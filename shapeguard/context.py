"""
Context manager for validation configuration (e.g., recursion depth).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from pydantic import BaseModel, ConfigDict, PositiveInt


class ValidationOptions(BaseModel):
    """Tunables for the validation engine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Deepest nesting a shape or array validator will descend into
    max_depth: PositiveInt = 100
    # Longest rendered value allowed in an error message
    max_render_length: PositiveInt = 200
    # Containers nested deeper than this render as [...] or {...}
    max_render_depth: PositiveInt = 20


# Context variable for the active options
_options: ContextVar[ValidationOptions] = ContextVar(
    "validation_options", default=ValidationOptions()
)


def get_options() -> ValidationOptions:
    """Return the options currently in effect."""
    return _options.get()


@contextmanager
def validation_context(**overrides: Any):
    """
    Context manager for validation configuration.

    Args:
        max_depth: Nesting depth after which shape and array validators stop
                   descending and report an error instead.
        max_render_length: Maximum length of a value rendered into an error
                   message; longer renderings are truncated with "...".
        max_render_depth: Container nesting rendered into an error message
                   before deeper levels are elided.

    Unspecified options keep their current values. Invalid values raise
    pydantic.ValidationError before the block is entered.

    Example:
        from shapeguard import check, validation_context

        with validation_context(max_depth=10):
            check(deeply_nested, spec)
    """
    merged = {**get_options().model_dump(), **overrides}
    token = _options.set(ValidationOptions(**merged))
    try:
        yield
    finally:
        _options.reset(token)
