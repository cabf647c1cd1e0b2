"""
Context manager for mapping configuration (strict mode, nesting limit).
"""

from contextlib import contextmanager
from contextvars import ContextVar

DEFAULT_MAX_DEPTH = 100

_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)
_max_depth: ContextVar[int] = ContextVar("max_depth", default=DEFAULT_MAX_DEPTH)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


def get_max_depth() -> int:
    """Maximum nesting depth allowed for a mapping spec."""
    return _max_depth.get()


@contextmanager
def mapping_context(*, strict: bool = False, max_depth: int = DEFAULT_MAX_DEPTH):
    """
    Context manager for mapping configuration.

    Args:
        strict: If True, resolve() raises PathNotFoundError on missing keys
               instead of returning the default. A key that exists with a
               None value is still returned as None.
        max_depth: Deepest spec nesting accepted before raising
               SpecificationTooDeepError.

    Example:
        from dtomap import map_to_dto, mapping_context

        spec = {"id": "data.patient.id", "missing": "key.not.found"}

        # Normal: missing paths become None
        map_to_dto(source, spec)

        # Strict: raises PathNotFoundError on the missing path
        with mapping_context(strict=True):
            map_to_dto(source, spec)
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")

    strict_token = _strict_mode.set(strict)
    depth_token = _max_depth.set(max_depth)
    try:
        yield
    finally:
        _max_depth.reset(depth_token)
        _strict_mode.reset(strict_token)
