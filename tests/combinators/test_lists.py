import pytest

from combinators import head, keep, last, map_indexed, pluck, reject, sort_by, total
from composer import pipe


def test_sort_by_is_stable_and_returns_new_list(cars: list[dict]) -> None:
    # Arrange
    cars.append({"name": "Tesla", "horsepower": 300})
    # Act
    ranked = sort_by(lambda car: car["horsepower"], cars)
    # Assert
    assert [car["name"] for car in ranked] == [
        "Aston Martin One-77",
        "Jaguar XKR-S",
        "Ferrari FF",
        "Tesla",
    ]
    assert ranked is not cars


@pytest.mark.parametrize(
    "items, first, final",
    [
        pytest.param([1, 2, 3], 1, 3, id="list"),
        pytest.param("abc", "a", "c", id="string"),
        pytest.param([], None, None, id="empty"),
    ],
)
def test_head_and_last(items, first, final) -> None:
    assert head(items) == first
    assert last(items) == final


def test_keep_and_reject_split_items() -> None:
    is_even = lambda value: value % 2 == 0  # noqa: E731

    assert keep(is_even)([1, 2, 3, 4]) == [2, 4]
    assert reject(is_even)([1, 2, 3, 4]) == [1, 3]


def test_map_indexed_passes_value_index_and_items() -> None:
    items = ["a", "b"]

    assert map_indexed(lambda value, index, source: (value, index, source is items), items) == [
        ("a", 0, True),
        ("b", 1, True),
    ]


def test_cart_total_in_dollars() -> None:
    # Arrange
    cart = [{"price": 19.99}, {"price": 5.01}, {"price": 1000.0}]
    to_usd = "${:,.2f}".format
    get_total_price = pipe(pluck("price"), total, to_usd)
    # Act
    result = get_total_price(cart)
    # Assert
    assert result == "$1,025.00"
