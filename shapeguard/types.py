"""
Type definitions for shapeguard.

Provides the ErrorResult returned by failing validators and the type aliases
describing the validator contract.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Union

from .path import ContextPath


@dataclass(frozen=True, slots=True)
class ErrorResult:
    """A failed check: what went wrong, and where."""

    message: str
    context: ContextPath

    @property
    def path(self) -> str:
        return self.context()

    def __iter__(self) -> Iterator[Any]:
        # Unpacks as the (message, context) pair
        yield self.message
        yield self.context

    def __str__(self) -> str:
        if self.path:
            return f"{self.path} |> {self.message}"
        return self.message


# Type aliases
Validator = Callable[[Any, Optional[ContextPath]], Optional[ErrorResult]]
# Literal scalars resolve to equality checks
ValidatorSpec = Union[
    str, type, Validator, Mapping[str, Any], list, None, bool, int, float, complex, bytes
]
