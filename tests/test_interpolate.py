from __future__ import annotations

import pytest

from easy_i18n.interpolate import interpolate


def test_positional_substitution() -> None:
    assert interpolate("Scores: %1, %2", ["88", "100"]) == "Scores: 88, 100"


def test_order_follows_ordinal_not_position() -> None:
    assert interpolate("%2 before %1, again %2", ["a", "b"]) == "b before a, again b"


def test_out_of_range_becomes_empty() -> None:
    assert interpolate("x%5y", ["1", "2"]) == "xy"


@pytest.mark.parametrize("values", [[], ["a"], ["a", "b", "c"]])
def test_zero_ordinal_always_empty(values: list[str]) -> None:
    assert interpolate("[%0]", values) == "[]"


def test_maximal_digit_run() -> None:
    # %12 is one token, not %1 followed by "2"
    values = [str(i) for i in range(1, 13)]
    assert interpolate("%12", values) == "12"
    assert interpolate("%12", ["a"]) == ""


def test_leading_zeros() -> None:
    assert interpolate("%01", ["a"]) == "a"


def test_huge_ordinal_is_empty() -> None:
    assert interpolate("<%" + "9" * 5000 + ">", ["a"]) == "<>"


def test_ordinal_above_255_is_empty() -> None:
    values = [str(i) for i in range(1, 301)]
    assert interpolate("[%255]", values) == "[255]"
    assert interpolate("[%256]", values) == "[]"
    assert interpolate("[%0256]", values) == "[]"
    assert interpolate("[%" + "0" * 5000 + "7]", values) == "[7]"


def test_text_without_tokens_unchanged() -> None:
    assert interpolate("100% sure, 50 %", ["x"]) == "100% sure, 50 %"
    assert interpolate("%%1", ["x"]) == "%x"


def test_values_are_not_rescanned() -> None:
    assert interpolate("%1 %2", ["%2", "b"]) == "%2 b"


def test_non_ascii_digits_not_placeholders() -> None:
    assert interpolate("%١", ["x"]) == "%١"
