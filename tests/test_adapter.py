"""Schema adapter unit tests"""

from types import SimpleNamespace

import pytest

from autoform import nodes
from autoform.adapter import adapt_schema
from autoform.enums import ConstraintType, MetadataType, Primitive, WrapperKind
from autoform.errors import ShapeViolationError
from autoform.nodes import (
    ArrayNode,
    EnumNode,
    Leaf,
    ObjectNode,
    OpaqueNode,
    PicklistNode,
    Wrapper,
)


def test_own_nodes_pass_through_unchanged():
    schema = nodes.object_({"name": nodes.string()})

    assert adapt_schema(schema) is schema


def test_adapts_valibot_style_object():
    schema = {
        "kind": "schema",
        "type": "object",
        "entries": {
            "name": {"kind": "schema", "type": "string"},
            "age": {
                "kind": "schema",
                "type": "optional",
                "wrapped": {"kind": "schema", "type": "number"},
            },
        },
    }

    node = adapt_schema(schema)

    assert isinstance(node, ObjectNode)
    assert list(node.entries) == ["name", "age"]
    assert node.entries["name"] == nodes.string()
    assert isinstance(node.entries["age"], Wrapper)
    assert node.entries["age"].kind == WrapperKind.OPTIONAL
    assert node.entries["age"].inner == nodes.number()


def test_adapts_pipe_records():
    schema = {
        "type": "string",
        "pipe": [
            {"kind": "schema", "type": "string"},
            {"kind": "validation", "type": "min_length", "requirement": 2},
            {"kind": "validation", "type": "email", "requirement": r"^\S+@\S+$"},
            {"kind": "metadata", "type": "title", "title": "Full Name"},
            {"kind": "metadata", "type": "description", "description": "Your name"},
            {"kind": "metadata", "type": "metadata", "metadata": {"placeholder": "Jane"}},
            {"kind": "transformation", "type": "trim"},
        ],
    }

    node = adapt_schema(schema)

    assert node.actions == (
        nodes.min_length(2),
        nodes.email(),
        nodes.title("Full Name"),
        nodes.description("Your name"),
        nodes.metadata(placeholder="Jane"),
    )


def test_adapts_class_tagged_records_with_parameters():
    schema = {
        "kind": "number",
        "pipe": [
            {"class": "constraint", "type": "min_value", "parameters": {"requirement": 1}},
            {"class": "constraint", "type": "max_value", "parameters": [10]},
            {"class": "constraint", "type": "integer"},
            {"class": "metadata", "type": "title", "parameters": "Count"},
        ],
    }

    node = adapt_schema(schema)

    assert node == nodes.number(
        nodes.min_value(1), nodes.max_value(10), nodes.integer(), nodes.title("Count")
    )


def test_skips_unknown_and_malformed_records():
    schema = {
        "type": "number",
        "pipe": [
            {"kind": "validation", "type": "multiple_of", "requirement": 5},
            {"kind": "validation", "type": "min_value", "requirement": "five"},
            {"kind": "validation", "type": "max_value", "requirement": True},
            {"kind": "metadata", "type": "examples", "examples": [1]},
            {"kind": "metadata", "type": "metadata", "metadata": "not a mapping"},
            "garbage",
        ],
    }

    assert adapt_schema(schema).actions == ()


def test_length_bounds_must_be_whole_numbers():
    schema = {
        "type": "string",
        "pipe": [
            {"kind": "validation", "type": "min_length", "requirement": 2.5},
            {"kind": "validation", "type": "max_length", "requirement": 10.0},
            {"kind": "validation", "type": "min_value", "requirement": 0.5},
        ],
    }

    node = adapt_schema(schema)

    assert node.actions == (nodes.max_length(10), nodes.min_value(0.5))
    assert isinstance(node.actions[0].requirement, int)


def test_text_metadata_values_are_coerced_to_strings():
    bag = {
        "unit": 5,
        "section": 1.5,
        "placeholder": ["not", "text"],
        "component": {"name": "slider"},
        "color": 3,
    }
    schema = {
        "type": "number",
        "pipe": [{"kind": "metadata", "type": "metadata", "metadata": bag}],
    }

    node = adapt_schema(schema)

    assert node.actions == (
        nodes.metadata(unit="5", section="1.5", component={"name": "slider"}, color=3),
    )


def test_boolean_text_metadata_is_dropped():
    schema = {
        "type": "string",
        "pipe": [{"kind": "metadata", "type": "metadata", "metadata": {"unit": True}}],
    }

    assert adapt_schema(schema).actions == (nodes.metadata(),)


def test_adapts_attribute_objects():
    schema = SimpleNamespace(
        type="object",
        entries={
            "tags": SimpleNamespace(type="array", item=SimpleNamespace(type="string")),
        },
    )

    node = adapt_schema(schema)

    assert isinstance(node.entries["tags"], ArrayNode)
    assert node.entries["tags"].item == nodes.string()


def test_adapts_picklist_and_enum():
    schema = {
        "type": "object",
        "entries": {
            "role": {"type": "picklist", "options": ["admin", "user"]},
            "status": {"type": "enum", "enum": {"Active": "active", "Inactive": "inactive"}},
            "level": {"type": "enum", "options": [1, 2, 3]},
        },
    }

    node = adapt_schema(schema)

    assert isinstance(node.entries["role"], PicklistNode)
    assert node.entries["role"].options == ("admin", "user")
    assert isinstance(node.entries["status"], EnumNode)
    assert node.entries["status"].options == ("active", "inactive")
    assert node.entries["level"].options == (1, 2, 3)


@pytest.mark.parametrize("tag", ["unknown", "any"])
def test_any_like_tags_become_any_leaf(tag):
    node = adapt_schema({"type": tag})

    assert isinstance(node, Leaf)
    assert node.primitive == Primitive.ANY


@pytest.mark.parametrize(
    "schema, type_name",
    [
        ({"type": "union", "options": []}, "union"),
        ({"type": "optional"}, "optional"),
        ({"type": "array"}, "array"),
        ({"type": "object"}, "object"),
        ({}, ""),
    ],
)
def test_unrepresentable_schemas_become_opaque(schema, type_name):
    node = adapt_schema(schema)

    assert isinstance(node, OpaqueNode)
    assert node.type_name == type_name


def test_opaque_node_keeps_actions():
    node = adapt_schema({"type": "date", "pipe": [{"kind": "metadata", "type": "title", "title": "When"}]})

    assert isinstance(node, OpaqueNode)
    assert node.title == "When"


def test_nested_non_schema_values_become_opaque():
    node = adapt_schema({"type": "object", "entries": {"weird": 42}})

    assert isinstance(node.entries["weird"], OpaqueNode)


@pytest.mark.parametrize("value", [42, "string", None, ["type", "object"]])
def test_root_without_schema_shape_is_rejected(value):
    with pytest.raises(ShapeViolationError):
        adapt_schema(value)


def test_enum_typed_tags_are_accepted():
    node = adapt_schema(
        {
            "type": Primitive.STRING,
            "pipe": [{"kind": "validation", "type": ConstraintType.MAX_LENGTH, "requirement": 5}],
        }
    )

    assert node == nodes.string(nodes.max_length(5))
    assert node.actions[0].type == ConstraintType.MAX_LENGTH
    assert MetadataType.TITLE not in [action.type for action in node.actions]
