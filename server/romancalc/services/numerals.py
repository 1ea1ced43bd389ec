"""
Numeral detection and Roman/Arabic conversion.

Accepted operands are deliberately narrow: Arabic integers 1..10 and the ten
literal Roman tokens I..X. Results, on the other hand, may be any positive
integer, so ``arabic_to_roman`` covers the full greedy table up to M.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

MIN_OPERAND = 1
MAX_OPERAND = 10

ROMAN_NUMERALS: Mapping[str, int] = MappingProxyType(
    {
        "I": 1,
        "II": 2,
        "III": 3,
        "IV": 4,
        "V": 5,
        "VI": 6,
        "VII": 7,
        "VIII": 8,
        "IX": 9,
        "X": 10,
    }
)

_ROMAN_SYMBOLS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

# Plain decimal integer with an optional sign; int() alone would also accept
# whitespace, underscores and non-ASCII digits.
_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_arabic(token: str) -> int | None:
    if not _DECIMAL_INTEGER.fullmatch(token):
        return None
    return int(token)


def is_valid_operand_value(value: int) -> bool:
    return MIN_OPERAND <= value <= MAX_OPERAND


def is_arabic_numeral(token: str) -> bool:
    value = parse_arabic(token)
    return value is not None and is_valid_operand_value(value)


def is_roman_numeral(token: str) -> bool:
    return token in ROMAN_NUMERALS


def roman_to_arabic(numeral: str) -> int:
    """
    Accumulate character values left to right, undoing the previous addition
    whenever a larger symbol follows a smaller one (IV -> 1 + (5 - 2*1)).

    Only correct for the canonical tokens in ``ROMAN_NUMERALS``; characters
    outside that table count as zero.
    """
    total = 0
    previous = 0
    for char in numeral:
        current = ROMAN_NUMERALS.get(char, 0)
        if previous and current > previous:
            total += current - 2 * previous
        else:
            total += current
        previous = current
    return total


def arabic_to_roman(value: int) -> str:
    """Greedy subtractive conversion. Returns an empty string for ``value <= 0``."""
    if value <= 0:
        return ""

    parts: list[str] = []
    remaining = value
    for amount, symbol in _ROMAN_SYMBOLS:
        while remaining >= amount:
            parts.append(symbol)
            remaining -= amount
    return "".join(parts)
