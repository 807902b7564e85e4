from dataclasses import dataclass

import pytest

from combinators import (
    adjust_prop,
    assoc,
    complement,
    equals,
    gt,
    has,
    if_else,
    inc,
    keep,
    lt,
    pluck,
    prop,
    prop_satisfies,
    where,
)
from composer import __


@dataclass
class Person:
    name: str
    age: int


@pytest.mark.parametrize(
    "obj, expected",
    [
        pytest.param({"name": "Jane"}, "Jane", id="mapping"),
        pytest.param(Person(name="Jane", age=30), "Jane", id="attribute"),
        pytest.param({}, None, id="missing key"),
        pytest.param(object(), None, id="missing attribute"),
    ],
)
def test_prop_reads_keys_and_attributes(obj, expected) -> None:
    assert prop("name")(obj) == expected


def test_pluck_reads_every_item() -> None:
    cart = [{"price": 1.5}, {"price": 2.5}]

    assert pluck("price", cart) == [1.5, 2.5]


def test_assoc_returns_a_new_record() -> None:
    # Arrange
    record = {"count": 1}
    # Act
    updated = assoc("count", 5)(record)
    # Assert
    assert updated == {"count": 5}
    assert record == {"count": 1}


@pytest.mark.parametrize(
    "record, expected",
    [
        pytest.param({}, {"count": 1}, id="no count yet"),
        pytest.param({"count": 1}, {"count": 2}, id="existing count"),
    ],
)
def test_increment_count(record: dict, expected: dict) -> None:
    increment_count = if_else(has("count"), adjust_prop("count", inc), assoc("count", 1))

    assert increment_count(record) == expected


def test_adjust_prop_leaves_missing_key_alone() -> None:
    assert adjust_prop("count", inc, {"other": 1}) == {"other": 1}


@pytest.mark.parametrize(
    "record, expected",
    [
        pytest.param({"a": "foo", "b": "xxx", "x": 11, "y": 19}, True, id="all match"),
        pytest.param({"a": "xxx", "b": "xxx", "x": 11, "y": 19}, False, id="a differs"),
        pytest.param({"a": "foo", "b": "bar", "x": 11, "y": 19}, False, id="b is bar"),
        pytest.param({"a": "foo", "b": "xxx", "x": 10, "y": 19}, False, id="x too small"),
        pytest.param({"a": "foo", "b": "xxx", "x": 11, "y": 20}, False, id="y too big"),
        pytest.param({"a": "foo", "b": "xxx", "y": 19}, False, id="x missing"),
    ],
)
def test_where_checks_every_predicate(record: dict, expected: bool) -> None:
    predicate = where(
        {
            "a": equals("foo"),
            "b": complement(equals("bar")),
            "x": gt(__, 10),
            "y": lt(__, 20),
        }
    )

    assert predicate(record) is expected


def test_keep_young_adults() -> None:
    # Arrange
    people = [Person("Ann", 17), Person("Bob", 18), Person("Cy", 25), Person("Di", 26)]
    keep_young_adults = keep(prop_satisfies(lambda age: 18 <= age <= 25, "age"))
    # Act
    young_adults = keep_young_adults(people)
    # Assert
    assert [person.name for person in young_adults] == ["Bob", "Cy"]
