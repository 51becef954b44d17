"""Shared display precision for a batch of history records.

A table renders each numeric column with one precision so values line up
instead of each being rounded individually. The precision of a value is the
position of its first significant fractional digit plus a fixed number of
extra digits; a column's precision is the maximum over the batch.
"""

from collections.abc import Sequence
from dataclasses import replace
from decimal import Decimal

from quantizer.display.formatting import to_plain_string
from quantizer.models import HistoryRecord


def significant_decimal_places(value: Decimal | int | float | str, extra_significant_digits: int) -> int:
    """Count the fractional digits needed to show a value's leading significant digits.

    Works on the fixed-notation text of the value, so tiny amounts such as
    ``1E-9`` are counted positionally rather than through their exponent.

    Args:
        value: The amount to inspect.
        extra_significant_digits: Digits to keep after the first non-zero
            fractional digit.

    Returns:
        Index of the first non-zero fractional digit plus
        ``extra_significant_digits``, or 0 if the value is whole.
    """
    text = to_plain_string(value)
    _, _, fraction = text.partition(".")
    for index, digit in enumerate(fraction):
        if digit != "0":
            return index + extra_significant_digits
    return 0


def normalize(records: Sequence[HistoryRecord], extra_significant_digits: int) -> list[HistoryRecord]:
    """Stamp every record with the batch-wide precision of each numeric field.

    Two passes: the first collects the per-field maxima over the whole
    batch, the second returns copies carrying those maxima. Input records
    are not modified.

    Args:
        records: Converted history records, in display order.
        extra_significant_digits: See ``significant_decimal_places``.

    Returns:
        New records with ``price_decimals``, ``volume_in_base_decimals`` and
        ``volume_in_quote_decimals`` set. Empty input gives an empty list.
    """
    max_price = 0
    max_base = 0
    max_quote = 0

    for record in records:
        max_price = max(max_price, significant_decimal_places(record.price, extra_significant_digits))
        max_base = max(
            max_base, significant_decimal_places(record.volume_in_base, extra_significant_digits)
        )
        max_quote = max(
            max_quote, significant_decimal_places(record.volume_in_quote, extra_significant_digits)
        )

    return [
        replace(
            record,
            price_decimals=max_price,
            volume_in_base_decimals=max_base,
            volume_in_quote_decimals=max_quote,
        )
        for record in records
    ]
