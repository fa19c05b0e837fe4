"""
Property accessor used by shape validators to read fields off a candidate.
"""

from collections.abc import Mapping, Sequence
from typing import Any


def get(source: Any, key: str) -> Any:
    """
    Read a named property off an arbitrary value.

    Args:
        source: Mapping, sequence, or any object (dataclasses, pydantic
            models, plain instances are read by attribute)
        key: Property name; dotted keys ("user.tags.0") traverse nested values

    Returns:
        The property value, or None when any step along the way is missing

    Note:
        A key present verbatim in a mapping is returned before the key is
        split, so {"a.b": 1} resolves "a.b" to 1.

    Examples:
        get({"user": {"name": "Ada"}}, "user.name")   # "Ada"
        get({"tags": ["x", "y"]}, "tags.1")           # "y"
        get(None, "anything")                         # None
    """
    if isinstance(source, Mapping) and key in source:
        return source[key]

    current = source
    for segment in str(key).split("."):
        if current is None:
            return None
        current = _get_segment(current, segment)
    return current


def _get_segment(data: Any, segment: str) -> Any:
    """Read one segment off a mapping, sequence, or object."""
    if isinstance(data, Mapping):
        return data.get(segment)

    if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
        return _traverse_index(data, segment)

    return getattr(data, segment, None)


def _traverse_index(data: Sequence, segment: str) -> Any:
    """Index into a sequence; non-numeric segments fall back to attributes."""
    try:
        idx = int(segment)
    except ValueError:
        return getattr(data, segment, None)

    length = len(data)
    actual_idx = idx if idx >= 0 else length + idx

    if 0 <= actual_idx < length:
        return data[actual_idx]
    return None
