import math

import pytest

from combinators import always, default_to, equals, identity, if_else, where


@pytest.mark.parametrize(
    "person, expected",
    [
        pytest.param(
            {"name": "Ada", "loves_tech": True, "works_hard": True},
            "Ada may enjoy a tech career!",
            id="both true",
        ),
        pytest.param(
            {"name": "Bo", "loves_tech": True, "works_hard": False},
            "Bo wouldn't enjoy a tech career.",
            id="one false",
        ),
    ],
)
def test_should_code(person: dict, expected: str) -> None:
    should_code = if_else(
        where({"loves_tech": equals(True), "works_hard": equals(True)}),
        lambda person: f"{person['name']} may enjoy a tech career!",
        lambda person: f"{person['name']} wouldn't enjoy a tech career.",
    )

    assert should_code(person) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        pytest.param(None, 42, id="None"),
        pytest.param(math.nan, 42, id="NaN"),
        pytest.param(0, 0, id="falsy but present"),
        pytest.param("", "", id="empty string"),
        pytest.param(7, 7, id="value"),
    ],
)
def test_default_to(value, expected) -> None:
    assert default_to(42)(value) == expected


def test_always_and_identity() -> None:
    assert always("x")(1, 2, key=3) == "x"
    assert identity(obj := object()) is obj
