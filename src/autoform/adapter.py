"""Translate externally described schemas into schema nodes.

External schema objects are read through a small duck-typed surface: a type
tag (``type``, falling back to ``kind``), and optionally ``entries``,
``item``, ``options``, ``enum``, ``wrapped`` and a ``pipe`` of action
records. Both mappings and plain objects exposing these attributes are
accepted. The translation happens once; everything downstream of it only
deals with the closed node model.
"""

import logging
from enum import Enum
from typing import Any, Mapping, Optional

from .consts import TEXT_METADATA_KEYS
from .enums import ConstraintType, MetadataType, Primitive, WrapperKind
from .errors import ShapeViolationError
from .nodes import (
    NODE_TYPES,
    Action,
    ArrayNode,
    ConstraintAction,
    EnumNode,
    Leaf,
    MetadataAction,
    ObjectNode,
    OpaqueNode,
    PicklistNode,
    SchemaNode,
    Wrapper,
)

logger = logging.getLogger(__name__)

LEAF_TAGS = {
    "string": Primitive.STRING,
    "number": Primitive.NUMBER,
    "boolean": Primitive.BOOLEAN,
    "any": Primitive.ANY,
    "unknown": Primitive.ANY,
}

WRAPPER_TAGS = {kind.value: kind for kind in WrapperKind}

BOUND_CONSTRAINTS = {
    ConstraintType.MIN_VALUE,
    ConstraintType.MAX_VALUE,
    ConstraintType.MIN_LENGTH,
    ConstraintType.MAX_LENGTH,
}

LENGTH_CONSTRAINTS = {ConstraintType.MIN_LENGTH, ConstraintType.MAX_LENGTH}

CONSTRAINT_RECORD_KINDS = ("validation", "constraint")


def adapt_schema(schema: Any) -> SchemaNode:
    """Convert an external schema description into a schema node tree.

    Nodes of this package's own model are returned unchanged.

    Raises:
        ShapeViolationError: If ``schema`` is neither a mapping nor an object
            carrying a ``type`` or ``kind`` attribute
    """
    if isinstance(schema, NODE_TYPES):
        return schema

    if not isinstance(schema, Mapping) and _tag(schema) is None:
        raise ShapeViolationError(
            f"Cannot read a schema from {type(schema).__name__}: "
            "expected a mapping or an object with a 'type' attribute"
        )

    return _adapt(schema)


def _get(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _tag(obj: Any) -> Optional[str]:
    tag = _text(_get(obj, "type"))
    if tag is None:
        tag = _text(_get(obj, "kind"))
    return tag


def _adapt(schema: Any) -> SchemaNode:
    if isinstance(schema, NODE_TYPES):
        return schema

    tag = _tag(schema) or ""
    actions = _adapt_pipe(_get(schema, "pipe"))

    if tag in LEAF_TAGS:
        return Leaf(primitive=LEAF_TAGS[tag], actions=actions)

    if tag in WRAPPER_TAGS:
        wrapped = _get(schema, "wrapped")
        if wrapped is not None:
            return Wrapper(kind=WRAPPER_TAGS[tag], inner=_adapt(wrapped), actions=actions)

    elif tag == "object":
        entries = _get(schema, "entries")
        if isinstance(entries, Mapping):
            return ObjectNode(
                entries={str(key): _adapt(value) for key, value in entries.items()},
                actions=actions,
            )

    elif tag == "array":
        item = _get(schema, "item")
        if item is not None:
            return ArrayNode(item=_adapt(item), actions=actions)

    elif tag == "picklist":
        return PicklistNode(options=tuple(_get(schema, "options") or ()), actions=actions)

    elif tag == "enum":
        return EnumNode(options=_enum_options(schema), actions=actions)

    logger.debug(f"No node variant for schema type {tag!r}, keeping it opaque")
    return OpaqueNode(type_name=tag, actions=actions)


def _enum_options(schema: Any) -> tuple:
    options = _get(schema, "options")
    if options is not None:
        return tuple(options)

    members = _get(schema, "enum")
    if isinstance(members, Mapping):
        return tuple(members.values())
    return ()


def _adapt_pipe(pipe: Any) -> tuple[Action, ...]:
    if not isinstance(pipe, (list, tuple)):
        return ()

    actions = []
    for record in pipe:
        kind = _text(_get(record, "kind")) or _text(_get(record, "class"))
        if kind in CONSTRAINT_RECORD_KINDS:
            action = _adapt_constraint(record)
        elif kind == "metadata":
            action = _adapt_metadata(record)
        else:
            # Schemas at the head of a pipe, transformations, and the like
            action = None

        if action is not None:
            actions.append(action)
        else:
            logger.debug(f"Skipping pipe record {kind!r}/{_text(_get(record, 'type'))!r}")
    return tuple(actions)


def _requirement(record: Any) -> Any:
    requirement = _get(record, "requirement")
    if requirement is not None:
        return requirement

    parameters = _get(record, "parameters")
    if isinstance(parameters, Mapping):
        return parameters.get("requirement")
    if isinstance(parameters, (list, tuple)):
        return parameters[0] if parameters else None
    return parameters


def _adapt_constraint(record: Any) -> Optional[ConstraintAction]:
    try:
        constraint_type = ConstraintType(_text(_get(record, "type")))
    except ValueError:
        return None

    if constraint_type not in BOUND_CONSTRAINTS:
        return ConstraintAction(type=constraint_type, requirement=True)

    requirement = _requirement(record)
    if isinstance(requirement, bool) or not isinstance(requirement, (int, float)):
        return None
    if constraint_type in LENGTH_CONSTRAINTS:
        # Lengths count characters or items
        if isinstance(requirement, float) and not requirement.is_integer():
            return None
        requirement = int(requirement)
    return ConstraintAction(type=constraint_type, requirement=requirement)


def _metadata_bag(bag: Mapping) -> dict[str, Any]:
    metadata = dict(bag)
    for key in TEXT_METADATA_KEYS:
        value = metadata.get(key)
        if value is None or isinstance(value, str):
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            metadata[key] = str(value)
        else:
            logger.debug(f"Dropping non-text metadata {key}={value!r}")
            del metadata[key]
    return metadata


def _adapt_metadata(record: Any) -> Optional[MetadataAction]:
    try:
        metadata_type = MetadataType(_text(_get(record, "type")))
    except ValueError:
        return None

    if metadata_type == MetadataType.METADATA:
        bag = _get(record, "metadata")
        if bag is None:
            bag = _get(record, "parameters")
        if not isinstance(bag, Mapping):
            return None
        return MetadataAction(type=metadata_type, metadata=_metadata_bag(bag))

    text = _get(record, metadata_type.value)
    if text is None:
        text = _requirement(record)
    if text is None:
        return None
    return MetadataAction(type=metadata_type, text=str(text))
