"""
OPS-DESK Currency Utilities
INR amounts: paise/rupee conversion, Indian digit grouping, amounts in words.

Rupees are spelled using the Indian scales (Crore, Lakh, Thousand), not
the international million/billion scheme.
"""

import math
from decimal import Decimal
from typing import Tuple

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000

# 1 trillion rupee ceiling for accepted amounts
MAX_AMOUNT_RUPEES = 1_000_000_000_000

ONES = (
    "Zero", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight",
    "Nine", "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen",
    "Sixteen", "Seventeen", "Eighteen", "Nineteen",
)

TENS = (
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy",
    "Eighty", "Ninety",
)

# Most significant first; Units has no suffix
SCALES = (
    ("Crore", CRORE),
    ("Lakh", LAKH),
    ("Thousand", THOUSAND),
)


class AmountError(ValueError):
    """Raised when an amount cannot be converted."""
    pass


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def check_amount(amount) -> None:
    """Raise AmountError unless amount is a finite, non-negative number."""
    # bool is an int subclass, never a currency amount
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise AmountError(f"Amount must be a number, got {type(amount).__name__}")
    if isinstance(amount, Decimal):
        if not amount.is_finite():
            raise AmountError("Amount must be finite")
    elif isinstance(amount, float) and not math.isfinite(amount):
        raise AmountError("Amount must be finite")
    if amount < 0:
        raise AmountError("Amount must not be negative")


def rupees_to_paise(rupees: float) -> int:
    """Convert rupees to paise (×100)."""
    return _round_half_up(float(rupees) * 100)


def paise_to_rupees(paise: int) -> float:
    """Convert paise to rupees (÷100)."""
    return paise / 100.0


def group_indian(n: int) -> str:
    """
    Group digits the Indian way: last three, then pairs.

    group_indian(12345678) -> '1,23,45,678'
    """
    digits = str(n)
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_inr(paise: int) -> str:
    """Format paise as INR display string."""
    sign = "-" if paise < 0 else ""
    rupees, cents = divmod(abs(paise), 100)
    return f"{sign}₹{group_indian(rupees)}.{cents:02d}"


def validate_amount_rupees(rupees: float) -> bool:
    """Validate rupee amount is non-negative and reasonable."""
    if rupees < 0:
        return False
    if rupees > MAX_AMOUNT_RUPEES:
        return False
    return True


def split_amount(amount) -> Tuple[int, int]:
    """
    Split an amount into whole rupees and rounded paise (0-99).

    Paise that round up to 100 carry into the rupees.
    """
    check_amount(amount)
    rupees = int(math.floor(amount))
    paise = _round_half_up(float(amount - rupees) * 100)
    if paise >= 100:
        rupees += 1
        paise -= 100
    return rupees, paise


def scale_groups(n: int) -> Tuple[int, int, int, int]:
    """
    Decompose n into (crore, lakh, thousand, units).

    crore is unbounded; lakh < 100, thousand < 100, units < 1000.
    """
    crore, rest = divmod(n, CRORE)
    lakh, rest = divmod(rest, LAKH)
    thousand, units = divmod(rest, THOUSAND)
    return crore, lakh, thousand, units


def words(n: int) -> str:
    """Spell 0-999 in English. Zero spells as the empty string."""
    if not 0 <= n < 1000:
        raise AmountError(f"words() takes 0-999, got {n}")
    if n == 0:
        return ""
    if n < 20:
        return ONES[n]
    if n < 100:
        tail = " " + words(n % 10) if n % 10 else ""
        return TENS[n // 10] + tail
    tail = " " + words(n % 100) if n % 100 else ""
    return words(n // 100) + " Hundred" + tail


def _integer_words(n: int) -> str:
    parts = []
    crore, lakh, thousand, units = scale_groups(n)
    # A crore count past 999 is itself grouped, so words() stays in range
    if crore:
        parts.append(_integer_words(crore) + " Crore")
    for count, (name, _) in zip((lakh, thousand), SCALES[1:]):
        if count:
            parts.append(words(count) + " " + name)
    if units:
        parts.append(words(units))
    return " ".join(parts)


def number_to_words(amount) -> str:
    """
    Spell a rupee amount in words, Indian style.

    number_to_words(12345678)
        -> 'One Crore Twenty Three Lakh Forty Five Thousand Six Hundred
            Seventy Eight Rupees Only'
    number_to_words(99.5) -> 'Ninety Nine Rupees and Fifty Paise Only'

    "Rupees" is always plural. Raises AmountError for negative,
    non-finite or non-numeric input.
    """
    rupees, paise = split_amount(amount)

    if rupees == 0 and paise == 0:
        return "Zero Rupees Only"

    if rupees == 0:
        return words(paise) + " Paise Only"

    result = _integer_words(rupees) + " Rupees"
    if paise:
        result += " and " + words(paise) + " Paise"
    return result + " Only"
