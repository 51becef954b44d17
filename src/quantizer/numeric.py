"""Decimal coercion and step rounding shared by the ledger, order and display layers.

All monetary values use Decimal. Floats are accepted at the boundary only and
are converted through their shortest repr, never through their binary value.
"""

from decimal import Context, Decimal, InvalidOperation, localcontext

from quantizer.exceptions import InvalidInput

# Ledger amounts are up to 128-bit integers with up to 20 decimals; 80 digits
# covers a product of two such values without rounding.
WIDE_CONTEXT = Context(prec=80)

ZERO = Decimal("0")
ONE = Decimal("1")


def as_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric value to a finite Decimal.

    Args:
        value: Decimal, int, float or numeric text.

    Returns:
        The value as Decimal.

    Raises:
        InvalidInput: If the value is not numeric, or is NaN or infinite.
    """
    if isinstance(value, bool):
        raise InvalidInput(f"not a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise InvalidInput(f"not a number: {value!r}") from e
    else:
        raise InvalidInput(f"not a number: {value!r}")

    if not result.is_finite():
        raise InvalidInput(f"not a finite number: {value!r}")
    return result


def round_to_step(value: Decimal, step: Decimal) -> Decimal:
    """Round a value down to the nearest step increment.

    Uses integer division to ensure we always round DOWN (never up), so a
    quantized volume never exceeds what the user asked for.

    Args:
        value: The raw non-negative quantity to round.
        step: The minimum increment (e.g., 0.0001 base units).

    Returns:
        The value rounded down to the nearest step.
    """
    with localcontext(WIDE_CONTEXT):
        return (value // step) * step
