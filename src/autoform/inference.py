"""Infer a schema tree from an example value."""

import logging
from typing import Any, Mapping, Optional

from .consts import DEFAULT_MAX_DEPTH, EMAIL_PATTERN, ISO_DATE_PATTERN, URL_PATTERN
from .enums import ConstraintType
from .labels import humanize
from .nodes import (
    ConstraintAction,
    SchemaNode,
    any_,
    array,
    boolean,
    nullable,
    number,
    object_,
    string,
    title,
)

logger = logging.getLogger(__name__)

STRING_DETECTORS = (
    (EMAIL_PATTERN, ConstraintType.EMAIL),
    (URL_PATTERN, ConstraintType.URL),
    (ISO_DATE_PATTERN, ConstraintType.ISO_DATE),
)


def infer(value: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> SchemaNode:
    """Build a schema tree describing the shape of ``value``.

    Args:
        value: Example data made of None, booleans, numbers, strings,
            lists/tuples and mappings
        max_depth: Deepest level that is still described; anything below it
            becomes an ``any`` leaf

    Returns:
        Root node of the inferred tree. Every mapping entry below the root
        carries a title metadata action with its humanized key.
    """
    return _infer(value, max_depth, depth=0, key=None)


def _infer(value: Any, max_depth: int, depth: int, key: Optional[str]) -> SchemaNode:
    if depth > max_depth:
        logger.debug(f"Depth {depth} exceeds max depth {max_depth} at key {key!r}")
        return _labeled(any_(), key)

    if value is None:
        node = nullable(any_())
    elif isinstance(value, bool):
        node = boolean()
    elif isinstance(value, (int, float)):
        node = number()
    elif isinstance(value, str):
        node = _infer_string(value)
    elif isinstance(value, Mapping):
        node = object_(
            {
                str(k): _infer(v, max_depth, depth + 1, key=str(k))
                for k, v in value.items()
            }
        )
    elif isinstance(value, (list, tuple)):
        node = _infer_array(value, max_depth, depth)
    else:
        logger.debug(f"Unsupported value type {type(value).__name__}, using any")
        node = any_()

    return _labeled(node, key)


def _infer_string(value: str) -> SchemaNode:
    for pattern, constraint_type in STRING_DETECTORS:
        if pattern.search(value):
            return string(ConstraintAction(type=constraint_type, requirement=True))
    return string()


def _infer_array(items, max_depth: int, depth: int) -> SchemaNode:
    present = [item for item in items if item is not None]
    if not present:
        logger.debug("No element to inspect, falling back to string items")
        return array(string())

    kinds = {value_kind(item) for item in present}
    if len(kinds) > 1:
        logger.debug(f"Mixed element types {sorted(kinds)}, using any items")
        return array(any_())

    return array(_infer(present[0], max_depth, depth + 1, key=None))


def value_kind(value: Any) -> str:
    """Name the concrete type of an example value."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _labeled(node: SchemaNode, key: Optional[str]) -> SchemaNode:
    if key is None:
        return node
    return node.with_actions(title(humanize(key)))
