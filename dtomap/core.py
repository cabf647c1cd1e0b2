"""
Core resolve function for dtomap data traversal.
"""

from typing import Any

from .context import is_strict
from .errors import PathNotFoundError
from .lib.core_helpers import MISSING, traverse_path
from .parser import PathLike, parse_path


def resolve(source: Any, path: PathLike | None, default: Any = None) -> Any:
    """
    Extract a value from nested data structures using path notation.

    Args:
        source: Source data to traverse (mappings, lists, tuples)
        path: Path string (e.g., "data.items[0].name") or segment sequence
        default: Value returned when the path does not resolve

    Returns:
        Value at path or default if not found

    Raises:
        PathNotFoundError: In strict mode, if the path does not resolve
        ValueError: In strict mode, if the path syntax is invalid

    Note:
        Only absence yields the default. A key that exists with a None value
        resolves to None:
        - {"has_none": None} -> resolve(d, "has_none", "x") returns None
        - {} -> resolve(d, "missing", "x") returns "x"

    Examples:
        resolve(d, "user.name")             # Nested access
        resolve(d, "items[0]")              # Sequence index
        resolve(d, "items.0")               # Same as above
        resolve(d, ["user", "name"])        # Pre-split path
        resolve(d, "user.nickname", "n/a")  # With default
    """
    strict = is_strict()

    if not path:
        if strict:
            raise ValueError("Empty path")
        return default

    if source is None:
        if strict:
            raise PathNotFoundError(str(path))
        return default

    try:
        parsed = parse_path(path)
    except (ValueError, TypeError) as e:
        if strict:
            raise ValueError(f"Invalid path syntax: {path!r}") from e
        return default

    result = traverse_path(source, parsed, strict=strict)
    if result is MISSING:
        return default
    return result
