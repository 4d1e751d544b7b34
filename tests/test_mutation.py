"""Tests for the field mutation store."""

import pytest

from rdf_form.mutation import FieldMutationStore, coerce_value
from rdf_form.structures import BooleanField, DateField, IriField, NumberField, StringField

NAME = "http://example.org/name"
POP = "http://example.org/population"


@pytest.fixture()
def fields():
    return {
        NAME: StringField(NAME, "Name", "Paris"),
        POP: NumberField(POP, "Population", 2148000),
    }


def test_update_replaces_only_the_target(fields):
    store = FieldMutationStore(fields)

    updated = store.update(NAME, "Lutèce")

    assert updated[NAME] == StringField(NAME, "Name", "Lutèce")
    assert updated[POP] is fields[POP]
    assert store.get(NAME).value == "Lutèce"


def test_update_does_not_touch_the_source_mapping(fields):
    store = FieldMutationStore(fields)
    store.update(NAME, "Lutèce")

    assert fields[NAME].value == "Paris"


def test_update_unknown_predicate_is_a_no_op(fields):
    store = FieldMutationStore(fields)
    before = dict(store.fields)

    result = store.update("http://example.org/missing", "x")

    assert dict(result) == before
    assert "http://example.org/missing" not in store
    assert len(store) == 2


def test_fields_view_is_read_only(fields):
    store = FieldMutationStore(fields)

    with pytest.raises(TypeError):
        store.fields[NAME] = StringField(NAME, "Name", "x")


def test_values_and_iteration_order(fields):
    store = FieldMutationStore(fields)
    store.update(POP, None)

    assert list(store) == [NAME, POP]
    assert store.values() == {NAME: "Paris", POP: None}


@pytest.mark.parametrize(
    "field, raw, expected",
    [
        (BooleanField("p", "P", False), "on", True),
        (BooleanField("p", "P", True), None, False),
        (BooleanField("p", "P", False), "no", False),
        (NumberField("p", "P", 1), "42", 42),
        (NumberField("p", "P", 1), "4.5", 4.5),
        (NumberField("p", "P", 1), "", None),
        (DateField("p", "P", ""), "2024-02-29T00:00:00", "2024-02-29"),
        (StringField("p", "P", ""), "text", "text"),
        (IriField("p", "P", ""), None, ""),
    ],
)
def test_coerce_value(field, raw, expected):
    assert coerce_value(field, raw) == expected
