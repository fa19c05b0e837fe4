"""
Immutable dotted path used to locate a failure inside nested data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import overload


@dataclass(frozen=True, slots=True)
class ContextPath:
    """
    Callable path producer.

    Calling with no argument returns the accumulated path string. Calling
    with a segment returns a new ContextPath extended by that segment; the
    receiver is never modified, so sibling branches can share a parent.

        ctx = create_context_path()
        ctx("user")("tags")(2)()   # "user.tags.2"
    """

    base: str = ""
    depth: int = 0

    @overload
    def __call__(self) -> str: ...

    @overload
    def __call__(self, segment: str | int) -> ContextPath: ...

    def __call__(self, segment: str | int | None = None) -> str | ContextPath:
        if segment is None:
            return self.base
        segment = str(segment)
        joined = f"{self.base}.{segment}" if self.base else segment
        return ContextPath(joined, self.depth + 1)

    def __str__(self) -> str:
        return self.base


def create_context_path(base: str = "") -> ContextPath:
    """Create a root path producer starting at `base`."""
    return ContextPath(base)
