"""Schema node model.

A schema tree is built from a closed set of frozen node variants. Every
variant can carry an ordered tuple of actions: constraint actions describe
rules (bounds, formats), metadata actions describe presentation (title,
description, free-form hints). Trees are built once, by inference or by hand
with the builder helpers at the bottom of this module, and never mutated.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import ConstraintType, MetadataType, Primitive, WrapperKind


class ConstraintAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["constraint"] = "constraint"
    type: ConstraintType
    requirement: Union[bool, int, float, None] = None


class MetadataAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["metadata"] = "metadata"
    type: MetadataType
    text: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


Action = Annotated[Union[ConstraintAction, MetadataAction], Field(discriminator="kind")]


class BaseNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    actions: tuple[Action, ...] = ()

    def with_actions(self, *actions: Action):
        """Return a copy of this node with ``actions`` appended."""
        return self.model_copy(update={"actions": self.actions + tuple(actions)})

    @property
    def title(self) -> Optional[str]:
        for action in self.actions:
            if isinstance(action, MetadataAction) and action.type == MetadataType.TITLE:
                return action.text
        return None

    def has_constraint(self, constraint_type: ConstraintType) -> bool:
        return any(
            isinstance(action, ConstraintAction) and action.type == constraint_type
            for action in self.actions
        )


class Leaf(BaseNode):
    variant: Literal["leaf"] = "leaf"
    primitive: Primitive


class Wrapper(BaseNode):
    variant: Literal["wrapper"] = "wrapper"
    kind: WrapperKind
    inner: SchemaNode


class ObjectNode(BaseNode):
    variant: Literal["object"] = "object"
    entries: dict[str, SchemaNode] = Field(default_factory=dict)


class ArrayNode(BaseNode):
    variant: Literal["array"] = "array"
    item: SchemaNode


class PicklistNode(BaseNode):
    variant: Literal["picklist"] = "picklist"
    options: tuple[Any, ...] = ()


class EnumNode(BaseNode):
    variant: Literal["enum"] = "enum"
    options: tuple[Any, ...] = ()


class OpaqueNode(BaseNode):
    """A node whose external type has no counterpart in this model."""

    variant: Literal["opaque"] = "opaque"
    type_name: str = ""


SchemaNode = Annotated[
    Union[Leaf, Wrapper, ObjectNode, ArrayNode, PicklistNode, EnumNode, OpaqueNode],
    Field(discriminator="variant"),
]

NODE_TYPES = (Leaf, Wrapper, ObjectNode, ArrayNode, PicklistNode, EnumNode, OpaqueNode)

for _model in NODE_TYPES:
    _model.model_rebuild()


def unwrap(node: SchemaNode) -> tuple[SchemaNode, bool]:
    """Peel every wrapper layer off ``node``.

    Returns:
        The innermost non-wrapper node and whether the field is required,
        which holds only when no wrapper layer was present.
    """
    required = True
    while isinstance(node, Wrapper):
        required = False
        node = node.inner
    return node, required


# ==================== Builders ====================


def string(*actions: Action) -> Leaf:
    return Leaf(primitive=Primitive.STRING, actions=actions)


def number(*actions: Action) -> Leaf:
    return Leaf(primitive=Primitive.NUMBER, actions=actions)


def boolean(*actions: Action) -> Leaf:
    return Leaf(primitive=Primitive.BOOLEAN, actions=actions)


def any_(*actions: Action) -> Leaf:
    return Leaf(primitive=Primitive.ANY, actions=actions)


def optional(inner: SchemaNode, *actions: Action) -> Wrapper:
    return Wrapper(kind=WrapperKind.OPTIONAL, inner=inner, actions=actions)


def nullable(inner: SchemaNode, *actions: Action) -> Wrapper:
    return Wrapper(kind=WrapperKind.NULLABLE, inner=inner, actions=actions)


def nullish(inner: SchemaNode, *actions: Action) -> Wrapper:
    return Wrapper(kind=WrapperKind.NULLISH, inner=inner, actions=actions)


def object_(entries: Mapping[str, SchemaNode], *actions: Action) -> ObjectNode:
    return ObjectNode(entries=dict(entries), actions=actions)


def array(item: SchemaNode, *actions: Action) -> ArrayNode:
    return ArrayNode(item=item, actions=actions)


def picklist(options: Sequence[Any], *actions: Action) -> PicklistNode:
    return PicklistNode(options=tuple(options), actions=actions)


def enum_(options: Sequence[Any], *actions: Action) -> EnumNode:
    return EnumNode(options=tuple(options), actions=actions)


def title(text: str) -> MetadataAction:
    return MetadataAction(type=MetadataType.TITLE, text=text)


def description(text: str) -> MetadataAction:
    return MetadataAction(type=MetadataType.DESCRIPTION, text=text)


def metadata(**bag: Any) -> MetadataAction:
    return MetadataAction(type=MetadataType.METADATA, metadata=bag)


def min_value(requirement: float) -> ConstraintAction:
    return ConstraintAction(type=ConstraintType.MIN_VALUE, requirement=requirement)


def max_value(requirement: float) -> ConstraintAction:
    return ConstraintAction(type=ConstraintType.MAX_VALUE, requirement=requirement)


def min_length(requirement: int) -> ConstraintAction:
    return ConstraintAction(type=ConstraintType.MIN_LENGTH, requirement=requirement)


def max_length(requirement: int) -> ConstraintAction:
    return ConstraintAction(type=ConstraintType.MAX_LENGTH, requirement=requirement)


def integer() -> ConstraintAction:
    return ConstraintAction(type=ConstraintType.INTEGER, requirement=True)


def email() -> ConstraintAction:
    return ConstraintAction(type=ConstraintType.EMAIL, requirement=True)


def url() -> ConstraintAction:
    return ConstraintAction(type=ConstraintType.URL, requirement=True)


def iso_date() -> ConstraintAction:
    return ConstraintAction(type=ConstraintType.ISO_DATE, requirement=True)
