"""Order-entry layer -- price digit limits, volume steps and ledger-unit tickets."""

from quantizer.orders.digits import price_within_digit_limit, truncate_volume_input
from quantizer.orders.step import MAX_DECIMAL_PLACES, decimal_places_for_step, quantize
from quantizer.orders.ticket import OrderEntry

__all__ = [
    "MAX_DECIMAL_PLACES",
    "OrderEntry",
    "decimal_places_for_step",
    "price_within_digit_limit",
    "quantize",
    "truncate_volume_input",
]
