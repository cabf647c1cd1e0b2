"""
Helper functions for core resolve operations.
"""

from collections.abc import Mapping
from typing import Any

from ..errors import PathNotFoundError
from ..parser import Path

# Marks "no value here"; None is a legitimate resolved value
MISSING: Any = object()


def traverse_path(data: Any, path: Path, strict: bool = False) -> Any:
    """
    Walk data one segment at a time.

    Returns MISSING as soon as a segment cannot be followed, or raises
    PathNotFoundError when strict is set.
    """
    current = data

    for segment in path.segments:
        if current is None:
            return _missing(path, segment, strict)

        if isinstance(current, Mapping):
            current = _traverse_key(current, segment)
        elif isinstance(current, (list, tuple)):
            current = _traverse_index(current, segment)
        else:
            # Scalars (including str) have no addressable members
            current = MISSING

        if current is MISSING:
            return _missing(path, segment, strict)

    return current


def _traverse_key(data: Mapping, key: str) -> Any:
    """Look up a key the mapping explicitly holds."""
    if key in data:
        return data[key]
    return MISSING


def _traverse_index(data: list | tuple, segment: str) -> Any:
    """Look up a non-negative in-range index in a sequence."""
    if not segment.isdecimal():
        return MISSING
    idx = int(segment)
    if idx < len(data):
        return data[idx]
    return MISSING


def _missing(path: Path, segment: str, strict: bool) -> Any:
    if strict:
        raise PathNotFoundError(str(path), segment)
    return MISSING
