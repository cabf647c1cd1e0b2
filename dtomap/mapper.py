"""
DTO mapping - builds an output dict from a source object and a mapping spec.

map_to_dto() walks the spec depth-first. Every entry resolves a value from
the *top-level* source, optionally transforms it, and nested specs become
nested dicts. DTOMapper wraps a compiled spec and can validate the output
against a Pydantic model.
"""

import logging
from collections.abc import Mapping
from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from .context import get_max_depth
from .core import resolve
from .errors import MalformedRuleError, SpecificationTooDeepError
from .lib.data_mapping_helpers import is_pydantic_model, to_dict, validate_output
from .rules import NestedRule, PathRule, Rule, Spec, TransformRule, compile_spec

logger = logging.getLogger(__name__)

_OutT = TypeVar("_OutT", bound=BaseModel)


def map_to_dto(source: Any, spec: Spec, default: Any = None) -> dict[str, Any]:
    """
    Build a DTO from `source` following `spec`.

    Args:
        source: Nested source data (e.g. a decoded JSON response)
        spec: Mapping of output field names to rules or rule shorthand
        default: Value used for paths that do not resolve

    Returns:
        A new dict with exactly the keys (and nesting) of `spec`

    Raises:
        MalformedRuleError: If a spec entry is not a valid rule
        SpecificationTooDeepError: If the spec nests deeper than max_depth
        Exception: Whatever a transform raises, unchanged

    Example:
        spec = {
            "name": "user.name",
            "age": {"path": "user.age", "transform": lambda v, src: v or 10},
            "meta": {"created": "meta.created"},
        }
        map_to_dto(source, spec)
    """
    return _map_fields(source, compile_spec(spec), default)


def _map_fields(
    source: Any,
    fields: Mapping[str, Rule],
    default: Any,
    prefix: str = "",
    depth: int = 1,
) -> dict[str, Any]:
    max_depth = get_max_depth()
    if depth > max_depth:
        raise SpecificationTooDeepError(prefix or "<root>", depth, max_depth)

    logger.debug("Mapping %d fields at %s", len(fields), prefix or "<root>")
    result: dict[str, Any] = {}

    for name, rule in fields.items():
        field = f"{prefix}.{name}" if prefix else name
        match rule:
            case PathRule(path=path):
                result[name] = resolve(source, path, default)
            case TransformRule(path=path):
                result[name] = rule.apply(resolve(source, path, default), source)
            case NestedRule(fields=nested):
                result[name] = _map_fields(source, nested, default, field, depth + 1)
            case _:
                raise MalformedRuleError(field, rule)

    return result


class DTOMapper(Generic[_OutT]):
    """
    Reusable mapper for one spec, with optional output validation.

    The spec is compiled once, so malformed rules fail at construction
    rather than on the first call.
    """

    def __init__(
        self,
        spec: Spec,
        output_schema: Optional[Type[_OutT]] = None,
        default: Any = None,
    ):
        """
        Initialize a DTOMapper.

        Args:
            spec: Mapping of output field names to rules or rule shorthand
            output_schema: Optional Pydantic model the output is validated into
            default: Value used for paths that do not resolve
        """
        if output_schema is not None and not is_pydantic_model(output_schema):
            raise TypeError(
                f"output_schema must be a Pydantic model class, got {output_schema!r}"
            )
        self.rules = compile_spec(spec)
        self.output_schema = output_schema
        self.default = default

    @property
    def has_schemas(self) -> bool:
        """Check if this mapper has an output schema defined."""
        return self.output_schema is not None

    def transform(self, data: Any) -> dict[str, Any]:
        """Apply the spec to `data` without any validation."""
        return _map_fields(data, self.rules, self.default)

    def __call__(self, data: Any) -> _OutT | dict[str, Any]:
        """
        Map `data` and validate the result if an output schema is set.

        Returns:
            An instance of output_schema, or the plain output dict

        Raises:
            pydantic.ValidationError: If the output does not fit output_schema
        """
        input_dict = to_dict(data) if isinstance(data, BaseModel) else data
        output_dict = self.transform(input_dict)

        if self.output_schema is None:
            return output_dict

        logger.debug("Validating DTO against %s", self.output_schema.__name__)
        return validate_output(output_dict, self.output_schema)
