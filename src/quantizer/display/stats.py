"""Indicative auction statistics in display units.

Prices go through price_from_ledger; volumes are base amounts only, so the
quote side of volume_from_ledger is not used.
"""

from decimal import Decimal

from quantizer.ledger.scale import price_from_ledger, volume_from_ledger
from quantizer.ledger.types import RawIndicativeStats, ScaleSpec
from quantizer.models import IndicativeStats
from quantizer.numeric import ZERO


def convert_indicative_stats(
    raw: RawIndicativeStats,
    base: ScaleSpec,
    quote: ScaleSpec,
) -> IndicativeStats:
    """Convert raw indicative statistics to display units.

    Args:
        raw: Statistics in smallest units as reported by the auction.
        base: Scale of the traded asset.
        quote: Scale of the quote asset.

    Returns:
        IndicativeStats with every reported value converted and missing
        values left as None.
    """

    def price(value: Decimal | None) -> Decimal | None:
        if value is None:
            return None
        return price_from_ledger(value, base.decimals, quote.decimals)

    def volume(value: int | None) -> Decimal | None:
        if value is None:
            return None
        return volume_from_ledger(value, base.decimals, ZERO).volume_in_base

    return IndicativeStats(
        clearing_price=price(raw.clearing_price),
        clearing_volume=volume(raw.clearing_volume),
        min_ask_price=price(raw.min_ask_price),
        max_bid_price=price(raw.max_bid_price),
        total_ask_volume=volume(raw.total_ask_volume),
        total_bid_volume=volume(raw.total_bid_volume),
    )
