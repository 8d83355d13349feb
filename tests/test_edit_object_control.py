"""Tests for the composite edit control."""

import itertools

import pytest

from pyqt_controls.controls.views import ObjectView


def test_validate_requires_non_optional_name(person_control):
    """An empty required field makes the whole value invalid even if others are fine."""
    edit_control = person_control.edit_control()

    assert edit_control.validate({"name": "", "age": 30}) is False
    assert edit_control.validate({"name": "Ada", "age": 30}) is True
    assert edit_control.validate({"name": "Ada", "age": ""}) is True
    assert edit_control.validate({"name": "Ada", "age": "abc"}) is False


def test_validate_hands_absent_fields_to_children(person_control):
    edit_control = person_control.edit_control()

    assert edit_control.validate({"name": "Ada"}) is True   # age is optional
    assert edit_control.validate({}) is False               # name is not
    assert edit_control.validate(None) is False


@pytest.mark.parametrize("name, age", itertools.product(["", " ", "Ada"], ["", "12", "x", None]))
def test_validate_is_conjunction_of_fields(person_control, name, age):
    edit_control = person_control.edit_control()
    value = {"name": name, "age": age}

    expected = all(
        edit_control.edit_controls[field].validate(value[field]) for field in ("name", "age")
    )
    assert edit_control.validate(value) is expected


def test_invalid_nested_field_flips_outer_validity(contact_control):
    edit_control = contact_control.edit_control()
    value = contact_control.edit(contact_control.construct({
        "name": "Ada",
        "address": {"street": "Main St", "city": "London"},
    }))
    assert edit_control.validate(value) is True

    value = dict(value, address=dict(value["address"], city=""))
    assert edit_control.validate(value) is False


def test_save_finalizes_every_field(person_control):
    edit_control = person_control.edit_control()

    assert edit_control.save({"name": "Ada", "age": "30"}) == {"name": "Ada", "age": 30}
    assert edit_control.save({"name": "Ada", "age": ""}) == {"name": "Ada", "age": None}


def test_save_recurses_into_nested_composites(contact_control):
    edit_control = contact_control.edit_control()
    saved = edit_control.save({
        "name": "Ada",
        "address": {"street": "Main St", "city": "London"},
        "active": True,
    })
    assert saved == {"name": "Ada", "address": {"street": "Main St", "city": "London"}, "active": True}


def test_edit_then_save_round_trip(contact_control):
    typed = contact_control.construct({"name": "Ada", "address": {"city": "London"}, "active": True})
    edit_control = contact_control.edit_control()

    assert edit_control.save(contact_control.edit(typed)) == typed


def test_render_computes_each_field_validity(person_control):
    edit_control = person_control.edit_control()
    view = edit_control.render({"name": "", "age": "30"}, lambda value: None, False)

    assert isinstance(view, ObjectView)
    assert view.row("name").view.is_valid is False
    assert view.row("age").view.is_valid is True


def test_render_ignores_passed_aggregate_validity(person_control):
    """Row validity is recomputed locally, never copied from the caller."""
    edit_control = person_control.edit_control()
    value = {"name": "Ada", "age": "30"}

    trusted = edit_control.render(value, lambda v: None, True)
    stale = edit_control.render(value, lambda v: None, False)

    assert trusted == stale
    assert all(row.view.is_valid for row in stale.rows)


def test_render_field_update_replaces_one_field(person_control):
    edit_control = person_control.edit_control()
    values = {"name": "Ada", "age": ""}
    received = []

    view = edit_control.render(values, received.append, True)
    view.row("age").view.on_change("3")

    assert received == [{"name": "Ada", "age": "3"}]
    assert values == {"name": "Ada", "age": ""}


def test_render_nested_edit_update(contact_control):
    edit_control = contact_control.edit_control()
    values = contact_control.edit(contact_control.default())
    received = []

    view = edit_control.render(values, received.append, True)
    view.row("address").view.row("city").view.on_change("Paris")

    assert received[0]["address"] == {"street": "", "city": "Paris"}
    assert received[0]["name"] == ""
    assert values["address"]["city"] == ""


def test_render_non_mapping_value_starts_from_defaults(person_control):
    view = person_control.edit_control().render(None, lambda value: None, True)

    assert view.fields == ("name", "age")
    assert view.row("name").view.value == ""
    assert view.row("age").view.value == ""


def test_edit_controls_are_read_only(person_control):
    edit_control = person_control.edit_control()
    with pytest.raises(TypeError):
        edit_control.edit_controls["name"] = None
