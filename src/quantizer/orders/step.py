"""Volume step derivation from the auction's minimum order notional.

The auction rejects orders whose quote notional is below a fixed minimum.
At a given price that minimum corresponds to some amount of the base asset;
the order form should not offer more precision than that amount implies.

Two related computations:
- decimal_places_for_step: fractional base digits that are meaningful at
  this price, relative to the base asset's own decimals
- quantize: snap a requested base amount down to a power-of-ten step of the
  minimum order size

CRITICAL: All calculations use Decimal. log10 and adjusted() are exact for
powers of ten, so boundary prices do not lose a digit to float round-off.
"""

from decimal import ROUND_DOWN, ROUND_FLOOR, Decimal

from quantizer.display.formatting import fix_decimal
from quantizer.exceptions import InvalidInput, InvalidPrice
from quantizer.ledger.scale import price_to_ledger
from quantizer.logging import get_logger
from quantizer.models import QuantizationResult
from quantizer.numeric import ONE, WIDE_CONTEXT, ZERO, as_decimal, round_to_step

logger = get_logger(__name__)

# Beyond this many digits the price is treated as degenerate and the base
# asset's own precision is used instead.
MAX_DECIMAL_PLACES = 100


def _positive_price(value: Decimal | int | float | str) -> Decimal:
    try:
        price = as_decimal(value)
    except InvalidInput as e:
        raise InvalidPrice(str(e)) from e
    if price <= ZERO:
        raise InvalidPrice(f"price must be > 0, got {price}")
    return price


def _positive_step(value: Decimal | int | float | str) -> Decimal:
    step = as_decimal(value)
    if step <= ZERO:
        raise InvalidInput(f"step notional must be > 0, got {step}")
    return step


def decimal_places_for_step(
    price: Decimal | int | float | str,
    step_notional: Decimal | int | float | str,
    base_decimals: int,
    quote_decimals: int,
) -> int:
    """Number of fractional base digits one minimum-notional unit spans at ``price``.

    Steps:
    1. p = price_in_ledger_units / step_notional
    2. If p >= 1, a single base smallest unit already exceeds the minimum:
       return base_decimals
    3. Otherwise z = floor(-log10(p)) and the result is base_decimals - z
    4. If the result exceeds MAX_DECIMAL_PLACES, return base_decimals

    Args:
        price: Display price, quote per base.
        step_notional: Minimum order notional in quote smallest units.
        base_decimals: Decimals of the base asset.
        quote_decimals: Decimals of the quote asset.

    Returns:
        Allowed fractional digits for volume entry (may be negative: the
        volume must then be a multiple of a power of ten).

    Raises:
        InvalidPrice: If price is not positive.
        InvalidInput: If step_notional is not positive.
    """
    price_dec = _positive_price(price)
    step = _positive_step(step_notional)

    price_in_ledger_units = price_to_ledger(price_dec, base_decimals, quote_decimals)
    p = WIDE_CONTEXT.divide(price_in_ledger_units, step)
    if p >= ONE:
        return base_decimals

    extra_digits = int(
        (-p.log10(context=WIDE_CONTEXT)).to_integral_value(rounding=ROUND_FLOOR)
    )
    decimal_places = base_decimals - extra_digits

    # Only reachable for assets with more than MAX_DECIMAL_PLACES decimals.
    # A near-zero price gives a large negative result, which stays monotone.
    if decimal_places > MAX_DECIMAL_PLACES:
        logger.warning(
            "precision_overflow_clamped",
            price=price_dec,
            step_notional=step,
            computed=decimal_places,
            clamped_to=base_decimals,
        )
        return base_decimals

    return decimal_places


def quantize(
    price: Decimal | int | float | str,
    requested_base_amount: Decimal | int | float | str,
    base_decimals: int,
    step_notional: Decimal | int | float | str,
) -> QuantizationResult:
    """Snap a requested base amount down to the step implied by the minimum notional.

    Steps:
    1. minimum_order_size = step_notional / price
    2. decimal_places = max(0, -floor(log10(minimum_order_size)))
    3. step_size = 10^-min(decimal_places, base_decimals); a step finer than
       the base asset sets step_overflow and falls back to its smallest unit
    4. quantized = step_size * floor(requested / step_size)

    Args:
        price: Display price, quote per base.
        requested_base_amount: Base amount typed by the user.
        base_decimals: Decimals of the base asset.
        step_notional: Minimum order notional, in the same quote units as price.

    Returns:
        QuantizationResult; ``quantized_volume`` never exceeds the request
        and falls short of it by less than ``step_size``.

    Raises:
        InvalidPrice: If price is not positive.
        InvalidInput: If the amount is negative or the step is not positive.
    """
    price_dec = _positive_price(price)
    step = _positive_step(step_notional)
    amount = as_decimal(requested_base_amount)
    if amount < ZERO:
        raise InvalidInput(f"requested amount must be >= 0, got {amount}")

    minimum_order_size = WIDE_CONTEXT.divide(step, price_dec)
    # adjusted() is floor(log10(x)) for any non-zero finite Decimal
    decimal_places = max(0, -minimum_order_size.adjusted())
    step_overflow = decimal_places > base_decimals
    step_size = ONE.scaleb(-min(decimal_places, base_decimals))

    on_grid = round_to_step(amount, step_size)
    quantized_volume = on_grid.quantize(
        ONE.scaleb(-base_decimals), rounding=ROUND_DOWN, context=WIDE_CONTEXT
    )

    return QuantizationResult(
        step_size=step_size,
        decimal_places=decimal_places,
        quantized_volume=quantized_volume,
        volume_text=fix_decimal(on_grid, base_decimals, rounding=ROUND_DOWN),
        step_overflow=step_overflow,
    )
