"""Text rendering of display amounts."""

from decimal import ROUND_HALF_UP, Decimal

from quantizer.numeric import ONE, WIDE_CONTEXT, as_decimal


def to_plain_string(value: Decimal | int | float | str) -> str:
    """Render a number in fixed notation, never in exponent form.

    ``Decimal("1E-7")`` renders as ``"0.0000001"`` and ``Decimal("1E+3")`` as
    ``"1000"``, so digit counting on the result is always positional.
    """
    return format(as_decimal(value), "f")


def fix_decimal(
    value: Decimal | int | float | str | None,
    decimal_places: int | None,
    rounding: str = ROUND_HALF_UP,
) -> str:
    """Render a value with at most ``decimal_places`` digits, trailing zeros trimmed.

    Rounds half-up unless ``rounding`` says otherwise. When rounding turns a
    fractional value into a whole number the result keeps a ``.0`` suffix, so
    "2.0000000001" at 8 places shows as "2.0" while a whole 2 shows as "2".

    Args:
        value: The amount to render. None renders as "0".
        decimal_places: Maximum fractional digits; negative means 0. None renders as "0".
        rounding: A decimal rounding mode, e.g. ROUND_DOWN to never exceed ``value``.

    Returns:
        The rendered amount.
    """
    if value is None or decimal_places is None:
        return "0"

    amount = as_decimal(value)
    places = max(decimal_places, 0)
    rounded = amount.quantize(ONE.scaleb(-places), rounding=rounding, context=WIDE_CONTEXT)
    if rounded.is_zero():
        rounded = abs(rounded)

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    if "." not in text and amount != amount.to_integral_value():
        text += ".0"

    return text
