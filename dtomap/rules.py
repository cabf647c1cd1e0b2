"""
Rule types for mapping specifications.

A mapping spec is a dict from output field name to a Rule. Rules come in
three variants:

    PathRule("user.name")                          # copy the value at a path
    TransformRule("user.age", lambda v, src: v or 10)  # path + transform
    NestedRule({"created": PathRule("meta.created")})  # nested output object

Specs can also be written in shorthand, which compile_spec() turns into
rules up front:

    {
        "name": "user.name",
        "age": {"path": "user.age", "transform": default_age},
        "meta": {"metaCreated": {"path": "meta.created", "transform": to_iso}},
    }
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from .context import get_max_depth
from .errors import MalformedRuleError, SpecificationTooDeepError
from .parser import Path, PathLike

logger = logging.getLogger(__name__)

Transform = Callable[[Any, Any], Any]

_TRANSFORM_KEYS = frozenset({"path", "transform"})


@dataclass(frozen=True)
class PathRule:
    """Output field is the value found at `path` in the source."""

    path: PathLike


@dataclass(frozen=True)
class TransformRule:
    """
    Output field is `transform(value, source)` for the value found at `path`.

    The transform also receives the whole source object so it can consult
    sibling fields. Without a transform the value is used as is.
    """

    path: PathLike
    transform: Optional[Transform] = None

    def apply(self, value: Any, source: Any) -> Any:
        if self.transform is None:
            return value
        return self.transform(value, source)


@dataclass(frozen=True)
class NestedRule:
    """Output field is a nested object built from `fields` against the same source."""

    fields: Mapping[str, "Rule"]


Rule = Union[PathRule, TransformRule, NestedRule]
Spec = Mapping[str, Any]


def compile_spec(spec: Spec, *, _field: str = "", _depth: int = 1) -> dict[str, Rule]:
    """
    Validate a mapping spec and convert shorthand entries into Rules.

    Args:
        spec: Mapping of output field names to rules or shorthand

    Returns:
        A new dict with the same keys, in the same order, holding only Rules

    Raises:
        MalformedRuleError: If an entry cannot be interpreted as a rule
        SpecificationTooDeepError: If nesting exceeds the configured max_depth
    """
    if not isinstance(spec, Mapping):
        raise MalformedRuleError(_field or "<root>", spec, "a spec must be a mapping")

    max_depth = get_max_depth()
    if _depth > max_depth:
        raise SpecificationTooDeepError(_field or "<root>", _depth, max_depth)

    compiled: dict[str, Rule] = {}
    for name, rule in spec.items():
        field = f"{_field}.{name}" if _field else str(name)
        if not isinstance(name, str):
            raise MalformedRuleError(field, rule, "field names must be strings")
        compiled[name] = compile_rule(rule, field=field, _depth=_depth)

    if _depth == 1:
        logger.debug("Compiled spec with %d top-level fields", len(compiled))
    return compiled


def compile_rule(rule: Any, *, field: str, _depth: int = 1) -> Rule:
    """Turn a single spec entry into a Rule, or raise MalformedRuleError."""
    match rule:
        case PathRule(path=path):
            _check_path_type(field, rule, path)
            return rule
        case TransformRule(path=path, transform=transform):
            _check_path_type(field, rule, path)
            _check_transform(field, rule, transform)
            return rule
        case NestedRule(fields=fields):
            return NestedRule(compile_spec(fields, _field=field, _depth=_depth + 1))
        case str():
            return PathRule(rule)
        case list() | tuple():
            return PathRule(tuple(rule))
        case Mapping() if "path" in rule and _TRANSFORM_KEYS.issuperset(rule):
            path = rule["path"]
            transform = rule.get("transform")
            _check_path_type(field, rule, path)
            _check_transform(field, rule, transform)
            if isinstance(path, list):
                path = tuple(path)
            return TransformRule(path, transform)
        case Mapping():
            return NestedRule(compile_spec(rule, _field=field, _depth=_depth + 1))

    raise MalformedRuleError(field, rule)


def _check_path_type(field: str, rule: Any, path: Any) -> None:
    # Syntax is checked by resolve(), which falls back to the default
    if not isinstance(path, (str, list, tuple, Path)):
        raise MalformedRuleError(
            field, rule, "'path' must be a string or segment sequence"
        )


def _check_transform(field: str, rule: Any, transform: Any) -> None:
    if transform is not None and not callable(transform):
        raise MalformedRuleError(field, rule, "'transform' must be callable")
