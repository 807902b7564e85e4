"""Text predicates and parsers."""

from __future__ import annotations

import math
import re
import string
from typing import Any, Final

from composer import curry

_DIGITS: Final[str] = string.digits + string.ascii_lowercase


@curry
def test(pattern: str | re.Pattern[str], text: str) -> bool:
    """Check whether `pattern` matches anywhere in `text`.

    ``test(re.compile("bobo", re.IGNORECASE))`` is a reusable predicate.
    """
    return re.search(pattern, text) is not None


def parse_int(text: str, radix: int | None = 10, *_: Any) -> int | float:
    """
    Parse the leading integer of `text` in base `radix`.

    Behaves like the classic radix-sensitive `parseInt`: arguments after the
    radix are ignored, a radix of 0 or None means base 10, and NaN is returned
    instead of raising.

    :param text: The text to parse; leading whitespace and a sign are allowed.
    :param radix: Base between 2 and 36.
    :returns: The parsed integer, or NaN when the radix is out of range or no
        digit could be parsed.
    """
    radix = radix or 10
    if not 2 <= radix <= 36:
        return math.nan

    body = str(text).lstrip()
    sign = -1 if body.startswith("-") else 1
    body = body[1:] if body[:1] in "+-" else body

    value, parsed = 0, False
    for char in body.lower():
        digit = _DIGITS.find(char)
        if digit == -1 or digit >= radix:
            break
        value, parsed = value * radix + digit, True
    return sign * value if parsed else math.nan
