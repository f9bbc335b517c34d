"""Derive field descriptors from a schema tree."""

import json
import logging
from typing import Any, Iterable, Optional, Sequence, Union

from .adapter import adapt_schema
from .consts import SCALAR_ITEM_NAME, TEXT_METADATA_KEYS, UI_METADATA_KEYS
from .descriptors import (
    FieldConstraints,
    FieldDescriptor,
    FieldOption,
    FieldUI,
)
from .enums import ConstraintType, FieldType, MetadataType, Primitive
from .errors import ShapeViolationError
from .nodes import (
    Action,
    ArrayNode,
    ConstraintAction,
    EnumNode,
    Leaf,
    MetadataAction,
    ObjectNode,
    PicklistNode,
    SchemaNode,
    unwrap,
)
from .overrides import OverrideMap, apply_overrides

logger = logging.getLogger(__name__)

__all__ = [
    "FieldConstraints",
    "FieldDescriptor",
    "FieldOption",
    "FieldUI",
    "introspect",
    "resolve_field",
    "resolve_type",
]

LEAF_FIELD_TYPES = {
    Primitive.STRING: FieldType.STRING,
    Primitive.NUMBER: FieldType.NUMBER,
    Primitive.BOOLEAN: FieldType.BOOLEAN,
}

NODE_FIELD_TYPES = {
    ObjectNode: FieldType.OBJECT,
    ArrayNode: FieldType.ARRAY,
    PicklistNode: FieldType.PICKLIST,
    EnumNode: FieldType.ENUM,
}

CONSTRAINT_SLOTS = {
    ConstraintType.MIN_VALUE: "min",
    ConstraintType.MAX_VALUE: "max",
    ConstraintType.MIN_LENGTH: "min_length",
    ConstraintType.MAX_LENGTH: "max_length",
    ConstraintType.INTEGER: "integer",
    ConstraintType.EMAIL: "email",
}

FLAG_CONSTRAINTS = {ConstraintType.INTEGER, ConstraintType.EMAIL}

LENGTH_CONSTRAINTS = {ConstraintType.MIN_LENGTH, ConstraintType.MAX_LENGTH}


def introspect(schema: Any, overrides: Optional[OverrideMap] = None) -> list[FieldDescriptor]:
    """Describe every field of an object schema.

    Args:
        schema: Root schema node, or an external schema description the
            adapter understands
        overrides: Optional map of top-level field name to UI overrides

    Returns:
        One descriptor per entry of the root object, in entry order

    Raises:
        ShapeViolationError: If the root is not an object schema
    """
    root = adapt_schema(schema)
    if not isinstance(root, ObjectNode):
        raise ShapeViolationError(
            f"introspect expects an object schema at the root, got {_describe(root)}"
        )

    fields = [resolve_field(node, name) for name, node in root.entries.items()]
    return apply_overrides(fields, overrides)


def resolve_field(
    node: SchemaNode, name: str, path: Optional[Sequence[Union[str, int]]] = None
) -> FieldDescriptor:
    path = tuple(path) if path is not None else (name,)
    inner, required = unwrap(node)
    constraints, ui = extract_actions(inner.actions)
    field_type = resolve_type(inner)

    options = None
    children = None
    item_schema = None

    if field_type in (FieldType.PICKLIST, FieldType.ENUM):
        options = [
            FieldOption(label=_option_label(option), value=option) for option in inner.options
        ]
    elif field_type == FieldType.OBJECT:
        children = [
            resolve_field(child, key, path + (key,)) for key, child in inner.entries.items()
        ]
    elif field_type == FieldType.ARRAY:
        item_schema = _resolve_item_schema(inner.item)

    return FieldDescriptor(
        name=name,
        path=path,
        type=field_type,
        required=required,
        constraints=constraints,
        ui=ui,
        options=options,
        children=children,
        item_schema=item_schema,
    )


def _resolve_item_schema(item: SchemaNode) -> list[FieldDescriptor]:
    # Paths restart at the element: they describe one repeated item.
    if isinstance(item, ObjectNode):
        return [resolve_field(child, key, (key,)) for key, child in item.entries.items()]
    return [resolve_field(item, SCALAR_ITEM_NAME, (SCALAR_ITEM_NAME,))]


def resolve_type(node: SchemaNode) -> FieldType:
    """Map a non-wrapper node onto a descriptor type.

    Variants without a matching type, ``any`` leaves included, resolve to
    ``string`` so that the field still renders.
    """
    if isinstance(node, Leaf) and node.primitive in LEAF_FIELD_TYPES:
        return LEAF_FIELD_TYPES[node.primitive]

    field_type = NODE_FIELD_TYPES.get(type(node))
    if field_type is None:
        logger.debug(f"Rendering unrecognized variant {_describe(node)} as string")
        return FieldType.STRING
    return field_type


def extract_actions(actions: Iterable[Action]) -> tuple[FieldConstraints, FieldUI]:
    constraints = {}
    ui = {}

    for action in actions:
        if isinstance(action, ConstraintAction):
            slot = CONSTRAINT_SLOTS.get(action.type)
            if slot is None:
                continue
            if action.type in FLAG_CONSTRAINTS:
                constraints[slot] = True
            elif _fits_slot(action):
                constraints[slot] = action.requirement
            else:
                logger.debug(f"Ignoring {action.type.value} bound {action.requirement!r}")
        elif isinstance(action, MetadataAction):
            if action.type == MetadataType.TITLE:
                ui["label"] = action.text
            elif action.type == MetadataType.DESCRIPTION:
                ui["description"] = action.text
            else:
                for key in UI_METADATA_KEYS:
                    value = action.metadata.get(key)
                    if value is None:
                        continue
                    if key in TEXT_METADATA_KEYS and not isinstance(value, str):
                        logger.debug(f"Ignoring non-text metadata {key}={value!r}")
                        continue
                    ui[key] = value

    return FieldConstraints(**constraints), FieldUI(**ui)


def _fits_slot(action: ConstraintAction) -> bool:
    requirement = action.requirement
    if isinstance(requirement, bool) or not isinstance(requirement, (int, float)):
        return False
    if action.type in LENGTH_CONSTRAINTS:
        return isinstance(requirement, int) or requirement.is_integer()
    return True


def _option_label(option: Any) -> str:
    if isinstance(option, str):
        return option
    return json.dumps(option, ensure_ascii=False, default=str)


def _describe(node: SchemaNode) -> str:
    if isinstance(node, Leaf):
        return f"{node.variant}({node.primitive.value})"
    type_name = getattr(node, "type_name", None)
    if type_name:
        return f"{node.variant}({type_name})"
    return node.variant
