from .context import mapping_context
from .core import resolve
from .decorator import dto
from .errors import (
    DTOMapError,
    MalformedRuleError,
    PathNotFoundError,
    SpecificationTooDeepError,
)
from .mapper import DTOMapper, map_to_dto
from .parser import Path, parse_path
from .rules import NestedRule, PathRule, TransformRule, compile_spec

__all__ = [
    "resolve",
    "map_to_dto",
    "DTOMapper",
    "dto",
    "mapping_context",
    "compile_spec",
    "PathRule",
    "TransformRule",
    "NestedRule",
    "Path",
    "parse_path",
    "DTOMapError",
    "MalformedRuleError",
    "PathNotFoundError",
    "SpecificationTooDeepError",
]
