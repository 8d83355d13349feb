"""Tests for the composite control."""

from datetime import timedelta

import pytest

from pyqt_controls.controls.edit_object_control import EditObjectControl
from pyqt_controls.controls.fields import FieldDescriptor, FieldUpdate, apply_field_update
from pyqt_controls.controls.leaf_controls import DurationControl, NumberControl, StringControl
from pyqt_controls.controls.object_control import ObjectControl
from pyqt_controls.controls.views import LeafView, ObjectView
from pyqt_controls.exceptions import SchemaError


def test_default_keys_match_fields(person_control):
    """default() produces exactly one entry per field, from each child's default."""
    assert person_control.default() == {"name": "", "age": None}


def test_default_recurses_into_nested_composites(contact_control):
    assert contact_control.default() == {
        "name": "",
        "address": {"street": "", "city": ""},
        "active": False,
    }


@pytest.mark.parametrize("raw", [
    {"name": "Ada"},
    {"age": 3},
    {},
    {"name": "Ada", "age": 3, "unknown": "dropped"},
    None,
    "not a mapping",
])
def test_construct_key_set_is_field_list(person_control, raw):
    assert set(person_control.construct(raw)) == {"name", "age"}


def test_construct_fills_missing_fields_with_defaults(person_control):
    assert person_control.construct({"name": "Ada"}) == {"name": "Ada", "age": None}


def test_construct_out_of_range_duration_falls_back_to_default():
    control = ObjectControl([("wait", "Wait", DurationControl())])
    assert control.construct({"wait": "1000000000d"}) == {"wait": timedelta(0)}
    assert control.edit_control().validate({"wait": "1000000000d"}) is False


def test_construct_copies_nested_raw_values(contact_control):
    """Mutating raw input after construct() must not leak into the typed value."""
    raw = {"name": "Ada", "address": {"street": "Main St", "city": "London"}}
    constructed = contact_control.construct(raw)

    raw["address"]["street"] = "Changed"

    assert constructed["address"] is not raw["address"]
    assert constructed["address"]["street"] == "Main St"


def test_construct_serialize_round_trip(contact_control):
    typed = contact_control.construct({
        "name": "Ada",
        "address": {"street": "Main St"},
        "active": True,
    })
    assert contact_control.construct(contact_control.serialize(typed)) == typed


def test_serialize_of_construct_preserves_meaning():
    """serialize(construct(v)) == serialize(v), even when construct canonicalizes."""
    control = ObjectControl([
        ("timeout", "Timeout", DurationControl()),
        ("limit", "Limit", NumberControl()),
    ])
    raw = {"timeout": "90", "limit": "7"}

    assert control.serialize(control.construct(raw)) == control.serialize(raw)
    assert control.serialize(control.construct(raw)) == {"timeout": "1m30s", "limit": 7}


def test_serialize_uses_child_serializers():
    control = ObjectControl([("timeout", "Timeout", DurationControl())])
    assert control.serialize({"timeout": timedelta(hours=1, minutes=30)}) == {"timeout": "1h30m"}


def test_edit_delegates_to_children(person_control):
    """Numbers are edited as text; strings pass through."""
    assert person_control.edit({"name": "Ada", "age": 30}) == {"name": "Ada", "age": "30"}
    assert set(person_control.edit({})) == {"name", "age"}


def test_is_singular(person_control):
    assert person_control.is_singular() is False
    assert StringControl().is_singular() is True


def test_render_rows_follow_field_order(person_control):
    view = person_control.render({"name": "Ada", "age": None}, lambda value: None)

    assert isinstance(view, ObjectView)
    assert view.fields == ("name", "age")
    assert [row.title for row in view.rows] == ["Name", "Age"]
    assert isinstance(view.row("name").view, LeafView)
    assert view.row("name").view.value == "Ada"
    assert view.row("name").view.is_valid is None


def test_render_field_update_replaces_one_field(person_control):
    """The scenario from the docs: editing age leaves name untouched."""
    values = {"name": "Ada", "age": None}
    received = []

    view = person_control.render(values, received.append)
    view.row("age").view.on_change(30)

    assert received == [{"name": "Ada", "age": 30}]
    assert received[0] is not values
    assert values == {"name": "Ada", "age": None}


def test_render_nested_update_bubbles_one_level_at_a_time(contact_control):
    values = contact_control.construct({"name": "Ada", "address": {"street": "Main St", "city": "London"}})
    received = []

    view = contact_control.render(values, received.append)
    view.row("address").view.row("street").view.on_change("High St")

    assert len(received) == 1
    updated = received[0]
    assert updated["address"] == {"street": "High St", "city": "London"}
    assert updated["name"] == "Ada"
    assert updated["active"] is False
    assert updated["address"] is not values["address"]
    assert values["address"]["street"] == "Main St"


def test_render_non_mapping_value_uses_defaults(person_control):
    received = []
    view = person_control.render(None, received.append)
    view.row("name").view.on_change("Ada")

    assert received == [{"name": "Ada", "age": None}]


def test_edit_control_derivation_is_idempotent(person_control):
    first = person_control.edit_control()
    second = person_control.edit_control()

    assert isinstance(first, EditObjectControl)
    assert first is not second
    assert first == second
    assert first.fields == second.fields
    assert first.optional == person_control.optional
    for value in ({"name": "", "age": ""}, {"name": "Ada", "age": "x"}, {"name": "Ada", "age": "4"}):
        for field in ("name", "age"):
            assert first.edit_controls[field].validate(value[field]) == \
                second.edit_controls[field].validate(value[field])


def test_edit_control_keeps_optional_flag():
    control = ObjectControl([("name", "Name", StringControl())], optional=True)
    assert control.edit_control().optional is True


def test_fields_accept_descriptors_and_triples():
    control = ObjectControl([
        FieldDescriptor("name", "Name", StringControl()),
        ("age", "Age", NumberControl()),
    ])
    assert [f.field for f in control.fields] == ["name", "age"]
    assert all(isinstance(f, FieldDescriptor) for f in control.fields)


def test_equal_schemas_compare_equal():
    def build():
        return ObjectControl([("name", "Name", StringControl()), ("age", "Age", NumberControl(optional=True))])

    assert build() == build()
    assert build() != ObjectControl([("name", "Name", StringControl())])


@pytest.mark.parametrize("fields", [
    [("name", "Name", StringControl()), ("name", "Other", StringControl())],
    [("name", "Name", "not a control")],
    [("name",)],
    [("", "Empty", StringControl())],
    [42],
])
def test_malformed_field_lists_fail_loud(fields):
    with pytest.raises(SchemaError):
        ObjectControl(fields)


def test_apply_field_update_does_not_mutate():
    values = {"a": 1, "b": 2}
    updated = apply_field_update(values, FieldUpdate("b", 3))

    assert updated == {"a": 1, "b": 3}
    assert values == {"a": 1, "b": 2}
