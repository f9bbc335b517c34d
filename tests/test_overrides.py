"""Override merger unit tests"""

import pytest
from pydantic import ValidationError

from autoform import nodes
from autoform.descriptors import FieldUI
from autoform.introspection import introspect
from autoform.overrides import (
    FieldConfig,
    apply_overrides,
    layer_overrides,
    normalize_overrides,
)


@pytest.fixture
def fields():
    schema = nodes.object_(
        {
            "name": nodes.string(nodes.title("Name"), nodes.metadata(placeholder="Jane")),
            "age": nodes.number(nodes.title("Age"), nodes.metadata(unit="years")),
            "address": nodes.object_({"city": nodes.string(nodes.title("City"))}),
        }
    )
    return introspect(schema)


def test_no_overrides_returns_same_descriptors(fields):
    result = apply_overrides(fields)

    assert result == fields
    assert all(a is b for a, b in zip(result, fields))


def test_empty_overrides_returns_same_descriptors(fields):
    result = apply_overrides(fields, {})

    assert all(a is b for a, b in zip(result, fields))


def test_override_wins_per_key_and_keeps_the_rest(fields):
    result = apply_overrides(fields, {"name": {"label": "Full Name", "description": "As on ID"}})

    assert result[0].ui == FieldUI(label="Full Name", description="As on ID", placeholder="Jane")


def test_unmatched_descriptors_are_referentially_unchanged(fields):
    result = apply_overrides(fields, {"name": FieldConfig(label="Full Name")})

    assert result[0] is not fields[0]
    assert result[1] is fields[1]
    assert result[2] is fields[2]


def test_override_does_not_mutate_input(fields):
    apply_overrides(fields, {"age": {"unit": "months"}})

    assert fields[1].ui.unit == "years"


def test_merge_is_top_level_only(fields):
    result = apply_overrides(fields, {"city": {"label": "Town"}, "address": {"section": "Home"}})

    address = result[2]
    assert address.ui.section == "Home"
    assert address.children[0].ui.label == "City"
    assert address.children is fields[2].children


def test_only_ui_changes(fields):
    result = apply_overrides(fields, {"age": {"label": "Your Age"}})

    merged, original = result[1], fields[1]
    assert merged.ui.label == "Your Age"
    assert merged.model_dump(exclude={"ui"}) == original.model_dump(exclude={"ui"})


def test_layout_hints_are_merged(fields):
    result = apply_overrides(
        fields,
        {"name": {"order": 2, "hidden": False, "colSpan": 6, "componentProps": {"rows": 3}}},
    )

    ui = result[0].ui
    assert ui.order == 2
    assert ui.hidden is False
    assert ui.col_span == 6
    assert ui.component_props == {"rows": 3}
    assert ui.label == "Name"


def test_empty_string_is_a_defined_override(fields):
    result = apply_overrides(fields, {"name": {"placeholder": ""}})

    assert result[0].ui.placeholder == ""


def test_override_for_missing_field_is_ignored(fields):
    result = apply_overrides(fields, {"ghost": {"label": "Boo"}})

    assert all(a is b for a, b in zip(result, fields))


def test_unknown_override_key_is_rejected(fields):
    with pytest.raises(ValidationError):
        apply_overrides(fields, {"name": {"lable": "Typo"}})


def test_introspect_applies_overrides():
    schema = nodes.object_({"email": nodes.string(nodes.email())})

    fields = introspect(schema, {"email": {"label": "E-mail", "placeholder": "you@example.com"}})

    assert fields[0].ui == FieldUI(label="E-mail", placeholder="you@example.com")
    assert fields[0].constraints.email is True


def test_normalize_overrides_accepts_both_forms():
    config = FieldConfig(unit="kg")

    normalized = normalize_overrides({"a": config, "b": {"col_span": 2}})

    assert normalized["a"] is config
    assert normalized["b"] == FieldConfig(col_span=2)
    assert normalize_overrides(None) == {}


def test_layer_overrides_later_maps_win_per_key():
    layered = layer_overrides(
        {"name": {"label": "Name", "placeholder": "Jane"}, "age": {"unit": "years"}},
        None,
        {"name": {"label": "Full Name"}},
    )

    assert layered["name"] == FieldConfig(label="Full Name", placeholder="Jane")
    assert layered["age"] == FieldConfig(unit="years")


def test_field_config_defined_skips_unset():
    assert FieldConfig(label="A", hidden=False).defined() == {"label": "A", "hidden": False}
