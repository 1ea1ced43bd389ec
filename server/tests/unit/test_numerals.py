import pytest

from romancalc.services.numerals import (
    ROMAN_NUMERALS,
    arabic_to_roman,
    is_arabic_numeral,
    is_roman_numeral,
    parse_arabic,
    roman_to_arabic,
)


@pytest.mark.parametrize("token", ["1", "5", "10", "+7", "03"])
def test_is_arabic_numeral_accepts_integers_in_range(token: str) -> None:
    assert is_arabic_numeral(token)


@pytest.mark.parametrize("token", ["0", "11", "-3", "abc", "V", "", "1_0", " 5", "٣", "2.5"])
def test_is_arabic_numeral_rejects_other_tokens(token: str) -> None:
    assert not is_arabic_numeral(token)


def test_parse_arabic_returns_none_for_non_integers() -> None:
    assert parse_arabic("7") == 7
    assert parse_arabic("-12") == -12
    assert parse_arabic("seven") is None


@pytest.mark.parametrize("token", list(ROMAN_NUMERALS))
def test_is_roman_numeral_accepts_canonical_tokens(token: str) -> None:
    assert is_roman_numeral(token)


@pytest.mark.parametrize("token", ["XI", "IIII", "VV", "iv", "L", "", "5"])
def test_is_roman_numeral_rejects_non_canonical_tokens(token: str) -> None:
    assert not is_roman_numeral(token)


@pytest.mark.parametrize(("token", "value"), list(ROMAN_NUMERALS.items()))
def test_roman_to_arabic_matches_table(token: str, value: int) -> None:
    assert roman_to_arabic(token) == value


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, "I"),
        (4, "IV"),
        (9, "IX"),
        (11, "XI"),
        (14, "XIV"),
        (40, "XL"),
        (90, "XC"),
        (100, "C"),
        (1994, "MCMXCIV"),
    ],
)
def test_arabic_to_roman_uses_subtractive_pairs(value: int, expected: str) -> None:
    assert arabic_to_roman(value) == expected


@pytest.mark.parametrize("value", [0, -1, -20])
def test_arabic_to_roman_is_empty_for_non_positive_values(value: int) -> None:
    assert arabic_to_roman(value) == ""


def test_round_trip_for_operand_range() -> None:
    for value in range(1, 11):
        assert roman_to_arabic(arabic_to_roman(value)) == value


def test_roman_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        ROMAN_NUMERALS["XI"] = 11  # type: ignore[index]
