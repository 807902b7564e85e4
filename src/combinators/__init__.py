"""
Curried helpers meant to be partially applied inside pipelines.

Quick Start:
    from composer import __, pipe
    from combinators import gt, keep, pluck, prop_satisfies, total

    keep_young_adults = keep(prop_satisfies(lambda age: 18 <= age <= 25, "age"))
    cart_total = pipe(pluck("price"), total)
    above_ten = gt(__, 10)
"""

from combinators.debug import tap, trace
from combinators.lists import head, keep, last, map_indexed, reject, sort_by, total
from combinators.logic import (
    always,
    complement,
    default_to,
    equals,
    gt,
    identity,
    if_else,
    inc,
    lt,
)
from combinators.objects import (
    adjust_prop,
    assoc,
    has,
    pluck,
    prop,
    prop_satisfies,
    where,
)
from combinators.strings import parse_int, test

__all__ = [
    # Objects
    "adjust_prop",
    "assoc",
    "has",
    "pluck",
    "prop",
    "prop_satisfies",
    "where",
    # Lists
    "head",
    "keep",
    "last",
    "map_indexed",
    "reject",
    "sort_by",
    "total",
    # Logic
    "always",
    "complement",
    "default_to",
    "equals",
    "gt",
    "identity",
    "if_else",
    "inc",
    "lt",
    # Strings
    "parse_int",
    "test",
    # Debug
    "tap",
    "trace",
]
