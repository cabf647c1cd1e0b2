"""
Exception types raised by dtomap.

Missing paths are not errors by default: the resolver returns its default
value instead. Failures raised by caller-supplied transforms are never
wrapped and propagate as they are.
"""

from typing import Any


class DTOMapError(Exception):
    """Base class for all dtomap errors."""


class MalformedRuleError(DTOMapError, TypeError):
    """A spec entry is neither a path, a path/transform pair, nor a nested spec."""

    def __init__(self, field: str, rule: Any, reason: str | None = None):
        self.field = field
        self.rule = rule
        detail = reason or (
            "expected a path string, a segment sequence, a {'path', 'transform'} "
            "mapping or a nested mapping"
        )
        super().__init__(
            f"Malformed rule for field '{field}': {detail}, got "
            f"{type(rule).__name__} {rule!r:.80}"
        )


class SpecificationTooDeepError(DTOMapError, RecursionError):
    """Spec nesting exceeds the configured maximum depth (usually a cyclic spec)."""

    def __init__(self, field: str, depth: int, max_depth: int):
        self.field = field
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Specification nesting at field '{field}' reached depth {depth} "
            f"(max_depth={max_depth}); is the spec referencing itself?"
        )


class PathNotFoundError(DTOMapError, KeyError):
    """Raised in strict mode when a path does not resolve."""

    def __init__(self, path: str, segment: str | None = None):
        self.path = path
        self.segment = segment
        if segment is None:
            message = f"Path '{path}' not found"
        else:
            message = f"Path '{path}' not found: no '{segment}'"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
