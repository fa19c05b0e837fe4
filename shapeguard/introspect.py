"""
Helpers that classify and render arbitrary values for error messages.
"""

import math
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any

from .context import get_options

NUMBER_TYPES = (int, float, complex, Decimal, Fraction)
SCALAR_TYPES = (type(None), bool, str, bytes, Enum, *NUMBER_TYPES)

# Every kind kind_of() can report
KINDS = frozenset({"null", "boolean", "number", "string", "function", "object"})


def kind_of(value: Any) -> str:
    """Primitive kind tag, the vocabulary of type-name specs."""
    if value is None:
        return "null"
    # bool subclasses int, so it must be tested first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, NUMBER_TYPES):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"


def type_of(value: Any) -> str:
    """
    Display kind for messages.

    Finer than kind_of(): arrays and classes are reported as such instead of
    being folded into "object" and "function".
    """
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, type):
        return "class"
    return kind_of(value)


class _RenderLimit(Exception):
    """Internal signal that the rendering budget is spent."""


class _Output:
    """Accumulates rendered text, signalling once it exceeds the limit."""

    def __init__(self, limit: int):
        self.parts: list[str] = []
        self.length = 0
        self.limit = limit

    def write(self, text: str) -> None:
        self.parts.append(text)
        self.length += len(text)
        if self.length > self.limit:
            raise _RenderLimit()

    def text(self) -> str:
        return "".join(self.parts)


def to_string(value: Any) -> str:
    """
    Render any value for inclusion in an error message.

    Never raises. Cyclic containers render the repeated node as [Circular],
    containers nested deeper than max_render_depth render as [...] or {...},
    and rendering stops once max_render_length is reached, ending in "...".
    """
    options = get_options()
    out = _Output(options.max_render_length)
    try:
        _render(value, out, frozenset(), options.max_render_depth)
    except _RenderLimit:
        return out.text()[: out.limit] + "..."
    return out.text()


def _render(value: Any, out: _Output, seen: frozenset[int], depth: int) -> None:
    if isinstance(value, str):
        out.write(f'"{value}"')
        return

    if callable(value):
        name = getattr(value, "__name__", None)
        out.write(name if isinstance(name, str) and name else "function")
        return

    if not isinstance(value, (list, tuple, Mapping)):
        out.write(_natural(value))
        return

    is_mapping = isinstance(value, Mapping)
    if id(value) in seen:
        out.write("[Circular]")
        return
    if depth <= 0:
        out.write("{...}" if is_mapping else "[...]")
        return

    seen = seen | {id(value)}
    out.write("{" if is_mapping else "[")
    items = value.items() if is_mapping else enumerate(value)
    for i, (key, item) in enumerate(items):
        if i:
            out.write(", ")
        if is_mapping:
            out.write(f"{_natural(key)}: ")
        _render(item, out, seen, depth - 1)
    out.write("}" if is_mapping else "]")


def _natural(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


def _is_number(value: Any) -> bool:
    return isinstance(value, NUMBER_TYPES) and not isinstance(value, bool)


def strict_equals(a: Any, b: Any) -> bool:
    """
    Strict equality without coercion across kinds.

    Numbers of any type compare by value (1 == 1.0), but a bool never equals
    a number. Other scalars must share the exact type and compare with ==;
    everything else compares by identity, so containers are never compared
    structurally. NaN is unequal to itself.
    """
    if _is_number(a) and _is_number(b):
        return bool(a == b)
    if type(a) is not type(b):
        return False
    if isinstance(a, SCALAR_TYPES):
        return bool(a == b)
    return a is b


def same_value_zero(a: Any, b: Any) -> bool:
    """strict_equals(), except that NaN matches NaN."""
    if strict_equals(a, b):
        return True
    return _is_nan(a) and _is_nan(b)


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False
