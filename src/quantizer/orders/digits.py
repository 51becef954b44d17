"""Order form input checks: price digit limit and per-keystroke volume cleanup."""

import re
from decimal import Decimal

from quantizer.numeric import WIDE_CONTEXT, ZERO, as_decimal

# Slack for float-typed prices whose repr carries binary round-off
# (0.1 + 0.2 -> 0.30000000000000004).
_INTEGER_TOLERANCE = Decimal("1e-10")

_NOT_VOLUME_CHAR = re.compile(r"[^0-9.]")


def price_within_digit_limit(price: Decimal | int | float | str, max_significant_digits: int) -> bool:
    """Check that a price has at most ``max_significant_digits`` significant digits.

    The price is shifted so its last allowed digit sits in the units place;
    it passes if the shifted value is (within tolerance) a whole number.

    Args:
        price: Display price.
        max_significant_digits: Digit limit published by the auction.

    Returns:
        True if the price fits the limit. Zero always fits; negative prices
        never do.
    """
    value = as_decimal(price)
    if value == ZERO:
        return True
    if value < ZERO:
        return False

    exponent = value.adjusted()
    scaled = value.scaleb(max_significant_digits - 1 - exponent, context=WIDE_CONTEXT)
    return abs(scaled - scaled.to_integral_value()) < _INTEGER_TOLERANCE


def truncate_volume_input(raw: str, max_fractional_digits: int) -> str:
    """Clean a partially typed volume string.

    Keeps ASCII digits and the first decimal point, drops every later point,
    then truncates (never rounds) the fraction to ``max_fractional_digits``
    digits, or drops it when the limit is 0 or less. Works on text so input
    such as "12." survives while the user is still typing.

    Examples:
        "12.3456abc", 2 -> "12.34"
        "1..2", 2 -> "1.2"
        "abc", 2 -> ""
    """
    cleaned = _NOT_VOLUME_CHAR.sub("", raw)

    whole, dot, fraction = cleaned.partition(".")
    fraction = fraction.replace(".", "")

    if max_fractional_digits <= 0:
        return whole
    if not dot:
        return whole
    return f"{whole}.{fraction[:max_fractional_digits]}"
