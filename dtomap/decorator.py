"""
The @dto decorator for shaping a function's return value into a DTO.
"""

from functools import wraps
from typing import Any, Callable, Optional, Type

from pydantic import BaseModel

from .mapper import DTOMapper
from .rules import Spec


def dto(
    spec: Spec,
    *,
    output_schema: Optional[Type[BaseModel]] = None,
    default: Any = None,
) -> Callable:
    """
    Decorator that maps whatever the wrapped function returns through `spec`.

    The spec is compiled when the decorator is applied, so a malformed spec
    fails at import time of the decorated function.

        @dto({"id": "data.user.id", "name": "data.user.name"})
        def fetch_user(payload):
            return json.loads(payload)

    Args:
        spec: Mapping spec applied to the function's return value
        output_schema: Optional Pydantic model to validate the DTO into
        default: Value used for paths that do not resolve

    Returns:
        Decorator producing a function that returns the mapped DTO.
    """
    dto_mapper: DTOMapper = DTOMapper(spec, output_schema=output_schema, default=default)

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return dto_mapper(func(*args, **kwargs))

        wrapper.mapper = dto_mapper  # type: ignore[attr-defined]
        return wrapper

    return decorator
