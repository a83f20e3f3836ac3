"""Character classes and number-literal scanning.

The leaf layer of the evaluator. Knows nothing about operators beyond
recognising them; the grammar decides what they mean.
"""

from __future__ import annotations

from rdcalc.models import MalformedNumberError

OPERATORS = ("+", "-", "*", "/")
ALPHABET = frozenset("0123456789.+-*/() ")


def is_digit(c: str) -> bool:
    """True iff c is one of the ten ASCII decimal digits."""
    return len(c) == 1 and "0" <= c <= "9"


def is_operator(c: str) -> bool:
    return c in OPERATORS


def is_space(c: str) -> bool:
    return c == " "


def parse_number(text: str, pos: int) -> tuple[float, int]:
    """Scan a decimal literal starting at text[pos].

    Accepts an optional leading '-', then digits with at most one decimal
    point. The integer and fractional parts are accumulated separately and
    combined once scanning stops.

    Args:
        text: Full input string.
        pos: Index to start scanning from.

    Returns:
        (value, end) where end is the index just past the last consumed
        character.

    Raises:
        MalformedNumberError: If no digit was consumed, or a second decimal
            point appears inside the same literal,
            or the value does not fit in a float.
    """
    start = pos
    end = len(text)

    sign = 1.0
    if pos < end and text[pos] == "-":
        sign = -1.0
        pos += 1

    whole = 0
    fraction = 0
    divisor = 1
    digits = 0
    in_fraction = False

    while pos < end:
        c = text[pos]
        if is_digit(c):
            if in_fraction:
                fraction = fraction * 10 + (ord(c) - ord("0"))
                divisor *= 10
            else:
                whole = whole * 10 + (ord(c) - ord("0"))
            digits += 1
        elif c == ".":
            if in_fraction:
                # 12.3.5
                raise MalformedNumberError(
                    "second decimal point in number literal", pos, text,
                )
            in_fraction = True
        else:
            break
        pos += 1

    if digits == 0:
        found = repr(text[start]) if start < end else "end of input"
        raise MalformedNumberError(f"expected a number, found {found}", start, text)

    try:
        value = whole + fraction / divisor
    except OverflowError:
        raise MalformedNumberError("number literal out of range", start, text) from None

    return sign * value, pos
