"""
Tests for INR amounts in words and formatting
"""
import math
from decimal import Decimal

import pytest

from utils import currency
from utils.currency import (
    AmountError,
    check_amount,
    format_inr,
    group_indian,
    number_to_words,
    paise_to_rupees,
    rupees_to_paise,
    scale_groups,
    split_amount,
    validate_amount_rupees,
    words,
)


@pytest.mark.parametrize("amount, expected", [
    (0, "Zero Rupees Only"),
    (1, "One Rupees Only"),
    (100, "One Hundred Rupees Only"),
    (1500, "One Thousand Five Hundred Rupees Only"),
    (100000, "One Lakh Rupees Only"),
    (12345678, "One Crore Twenty Three Lakh Forty Five Thousand Six Hundred Seventy Eight Rupees Only"),
    (99.50, "Ninety Nine Rupees and Fifty Paise Only"),
    (0.75, "Seventy Five Paise Only"),
])
def test_number_to_words_reference_values(amount, expected):
    assert number_to_words(amount) == expected


@pytest.mark.parametrize("amount, expected", [
    (101, "One Hundred One Rupees Only"),
    (2000011, "Twenty Lakh Eleven Rupees Only"),
    (100000000, "Ten Crore Rupees Only"),
    (99999999, "Nine Crore Ninety Nine Lakh Ninety Nine Thousand Nine Hundred Ninety Nine Rupees Only"),
    (0.0, "Zero Rupees Only"),
])
def test_number_to_words_groups(amount, expected):
    assert number_to_words(amount) == expected


def test_crore_count_above_999_is_grouped():
    assert number_to_words(10 ** 10) == "One Thousand Crore Rupees Only"
    assert number_to_words(12 * 10 ** 5 * 10 ** 7) == "Twelve Lakh Crore Rupees Only"


def test_paise_rounding_up_carries_into_rupees():
    assert split_amount(1.999) == (2, 0)
    assert number_to_words(1.999) == "Two Rupees Only"


def test_amount_rounding_to_nothing_is_zero():
    assert number_to_words(0.001) == "Zero Rupees Only"


def test_decimal_amounts():
    assert number_to_words(Decimal("1234.56")) == (
        "One Thousand Two Hundred Thirty Four Rupees and Fifty Six Paise Only"
    )


@pytest.mark.parametrize("amount", [-1, -0.5, float("nan"), float("inf"), Decimal("NaN")])
def test_out_of_contract_amounts_are_rejected(amount):
    with pytest.raises(AmountError):
        number_to_words(amount)


@pytest.mark.parametrize("amount", [True, "100", None, [1]])
def test_non_numeric_amounts_are_rejected(amount):
    with pytest.raises(AmountError):
        number_to_words(amount)


@pytest.mark.parametrize("amount", [0, 12.5, Decimal("3.25"), 10 ** 15])
def test_check_amount_accepts_finite_non_negative_numbers(amount):
    assert check_amount(amount) is None


@pytest.mark.parametrize("amount", [-0.01, float("inf"), Decimal("-Infinity"), False, "5"])
def test_check_amount_rejects(amount):
    with pytest.raises(AmountError):
        check_amount(amount)


def test_amount_error_is_a_value_error():
    assert issubclass(AmountError, ValueError)


@pytest.mark.parametrize("n, expected", [
    (0, ""),
    (7, "Seven"),
    (15, "Fifteen"),
    (40, "Forty"),
    (99, "Ninety Nine"),
    (110, "One Hundred Ten"),
    (500, "Five Hundred"),
    (999, "Nine Hundred Ninety Nine"),
])
def test_words(n, expected):
    assert words(n) == expected


@pytest.mark.parametrize("n", [-1, 1000])
def test_words_rejects_values_outside_three_digits(n):
    with pytest.raises(AmountError):
        words(n)


def test_words_recursion_stays_in_range(monkeypatch):
    original = currency.words
    seen = []
    depth = {"current": 0, "max": 0}

    def tracking(n):
        seen.append(n)
        depth["current"] += 1
        depth["max"] = max(depth["max"], depth["current"])
        try:
            return original(n)
        finally:
            depth["current"] -= 1

    monkeypatch.setattr(currency, "words", tracking)
    for n in range(1000):
        depth["max"] = 0
        tracking(n)
        assert depth["max"] <= 3

    assert all(0 <= value <= 999 for value in seen)


def test_scale_groups_reconstruct_the_number():
    samples = [0, 1, 999, 1000, 99999, 100000, 9999999, 10000000, 12345678,
               987654321, 10 ** 12 + 7, 2 ** 53]
    for n in samples:
        crore, lakh, thousand, units = scale_groups(n)
        assert crore * 10 ** 7 + lakh * 10 ** 5 + thousand * 10 ** 3 + units == n
        assert 0 <= lakh < 100
        assert 0 <= thousand < 100
        assert 0 <= units < 1000


@pytest.mark.parametrize("n, expected", [
    (0, "0"),
    (999, "999"),
    (1000, "1,000"),
    (100000, "1,00,000"),
    (12345678, "1,23,45,678"),
    (1000000000, "1,00,00,00,000"),
])
def test_group_indian(n, expected):
    assert group_indian(n) == expected


def test_format_inr():
    assert format_inr(1234567800) == "₹1,23,45,678.00"
    assert format_inr(5) == "₹0.05"
    assert format_inr(150050) == "₹1,500.50"


def test_paise_conversion():
    assert rupees_to_paise(99.5) == 9950
    assert rupees_to_paise(0.29) == 29
    assert math.isclose(paise_to_rupees(9950), 99.5)


def test_validate_amount_rupees():
    assert validate_amount_rupees(0)
    assert validate_amount_rupees(1_000_000_000_000)
    assert not validate_amount_rupees(-0.01)
    assert not validate_amount_rupees(1_000_000_000_001)
