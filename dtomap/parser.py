"""
Path parser for dtomap path expressions.

Supports:
- Simple keys: "data.patient.id"
- Sequence indices: "items[0]", "items[0].name", "[1].id"
- Numeric dot segments: "items.0.name" (same as "items[0].name")
- Pre-split segments: ["items", "0", "name"] or ("items", 0, "name")

Bracket indices are normalized to plain numeric segments, so every parsed
path is a flat tuple of string segments.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence, Union

PathLike = Union[str, Sequence[Union[str, int]]]


@dataclass(frozen=True)
class Path:
    """Represents a parsed path expression."""

    segments: tuple[str, ...]

    def __str__(self) -> str:
        return ".".join(self.segments)


class PathParser:
    """Parser for dtomap path expressions."""

    # Regex patterns
    KEY_PATTERN = re.compile(r"^[^.\[\]]+")
    INDEX_PATTERN = re.compile(r"^\[(\d+)\]")

    def parse(self, path_str: str) -> Path:
        """Parse a path string into a Path object."""
        if not path_str:
            raise ValueError("Empty path")

        segments: list[str] = []
        remaining = path_str

        while remaining:
            if match := self.INDEX_PATTERN.match(remaining):
                segments.append(match.group(1))
            elif match := self.KEY_PATTERN.match(remaining):
                segments.append(match.group(0))
            else:
                raise ValueError(f"Invalid path syntax at: {remaining}")
            remaining = remaining[match.end() :]

            if remaining.startswith("."):
                remaining = remaining[1:]
                if not remaining:
                    raise ValueError(f"Trailing dot in path: {path_str}")
            elif remaining and not remaining.startswith("["):
                raise ValueError(f"Invalid path syntax at: {remaining}")

        return Path(tuple(segments))


@lru_cache(maxsize=1024)
def _parse_string(path_str: str) -> Path:
    return PathParser().parse(path_str)


def parse_path(path: PathLike) -> Path:
    """
    Convert a path string or segment sequence into a Path.

    Raises:
        ValueError: If the path is empty or has invalid syntax
        TypeError: If a pre-split segment is not a str or int
    """
    if isinstance(path, Path):
        return path
    if isinstance(path, str):
        return _parse_string(path)

    segments = []
    for segment in path:
        # bool is an int subclass but never a valid index
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            raise TypeError(
                f"Path segments must be str or int, got {type(segment).__name__}"
            )
        segments.append(str(segment))
    if not segments:
        raise ValueError("Empty path")
    return Path(tuple(segments))
