"""Conversion between ledger smallest units and display units.

Ledger prices are quoted as quote smallest units per base smallest unit, so
a display price is ``raw * 10^(base_decimals - quote_decimals)``. Volumes are
base smallest units, so a display volume is ``raw * 10^-base_decimals``.

Scaling by a power of ten only moves the Decimal exponent, so conversions are
exact; products are taken in WIDE_CONTEXT because ledger volumes with 18
decimals overflow the default 28-digit context.
"""

from decimal import ROUND_HALF_UP, Decimal

from quantizer.exceptions import InvalidInput, InvalidPrice
from quantizer.logging import get_logger
from quantizer.models import VolumeAmounts
from quantizer.numeric import WIDE_CONTEXT, ZERO, as_decimal

logger = get_logger(__name__)


def _price(value: Decimal | int | float | str) -> Decimal:
    try:
        price = as_decimal(value)
    except InvalidInput as e:
        raise InvalidPrice(str(e)) from e
    if price < ZERO:
        raise InvalidPrice(f"price must be >= 0, got {price}")
    return price


def _volume(value: Decimal | int | float | str) -> Decimal:
    volume = as_decimal(value)
    if volume < ZERO:
        raise InvalidInput(f"volume must be >= 0, got {volume}")
    return volume


def price_from_ledger(
    raw_price: Decimal | int | float | str,
    base_decimals: int,
    quote_decimals: int,
) -> Decimal:
    """Convert a ledger price to quote display units per base display unit.

    No rounding is applied; precision is decided at presentation time.

    Args:
        raw_price: Price in quote smallest units per base smallest unit.
        base_decimals: Decimals of the traded (base) asset.
        quote_decimals: Decimals of the quote asset.

    Returns:
        Price in quote per base.

    Raises:
        InvalidPrice: If the price is negative or not a finite number.
    """
    return _price(raw_price).scaleb(base_decimals - quote_decimals, context=WIDE_CONTEXT)


def price_to_ledger(
    price: Decimal | int | float | str,
    base_decimals: int,
    quote_decimals: int,
) -> Decimal:
    """Convert a display price back to quote smallest units per base smallest unit.

    Exact inverse of ``price_from_ledger``.
    """
    return _price(price).scaleb(quote_decimals - base_decimals, context=WIDE_CONTEXT)


def volume_from_ledger(
    raw_volume: Decimal | int | str,
    base_decimals: int,
    price: Decimal,
) -> VolumeAmounts:
    """Convert a ledger volume to base and quote display units.

    Args:
        raw_volume: Volume in base smallest units.
        base_decimals: Decimals of the base asset.
        price: Display price (quote per base) used for the quote volume.

    Returns:
        VolumeAmounts with the base volume and its quote notional.
    """
    volume_in_base = _volume(raw_volume).scaleb(-base_decimals, context=WIDE_CONTEXT)
    volume_in_quote = WIDE_CONTEXT.multiply(volume_in_base, _price(price))
    return VolumeAmounts(volume_in_base=volume_in_base, volume_in_quote=volume_in_quote)


def volume_to_ledger(base_amount: Decimal | int | float | str, base_decimals: int) -> int:
    """Convert a base display amount to the nearest whole smallest unit.

    Digits finer than one smallest unit are rounded half-up without error;
    order-entry input is already truncated to the allowed digits upstream.
    """
    scaled = _volume(base_amount).scaleb(base_decimals, context=WIDE_CONTEXT)
    units = scaled.to_integral_value(rounding=ROUND_HALF_UP, context=WIDE_CONTEXT)
    if units != scaled:
        logger.debug(
            "volume_rounded_to_ledger_unit",
            amount=base_amount,
            base_decimals=base_decimals,
            units=int(units),
        )
    return int(units)
