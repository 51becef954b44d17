"""Order-entry boundary: validates form input and builds ledger-unit orders.

Every method is fail-soft. Conversion errors are logged and turned into
None/False so the form can disable submission instead of crashing.

Order flow:
1. accepts_price: price passes the auction's significant-digit limit
2. clean_volume_input: typed volume truncated to the digits meaningful at
   that price
3. quantize: volume snapped down to the minimum-notional step
4. build_ticket: price and volume converted to ledger units, rejected below
   the minimum order notional
5. has_sufficient_funds: the ticket fits the available balance
"""

from decimal import Decimal

from quantizer.config import OrderSettings
from quantizer.exceptions import QuantizerError
from quantizer.ledger.scale import price_to_ledger, volume_to_ledger
from quantizer.ledger.types import ScaleSpec
from quantizer.logging import get_logger
from quantizer.models import OrderSide, OrderTicket, QuantizationResult
from quantizer.numeric import WIDE_CONTEXT, as_decimal
from quantizer.orders.digits import price_within_digit_limit, truncate_volume_input
from quantizer.orders.step import decimal_places_for_step, quantize

logger = get_logger(__name__)


class OrderEntry:
    """Order form helper for one base/quote pair.

    Args:
        settings: Order settings (price digit limit, notional step and minimum).
        base: Scale of the traded asset.
        quote: Scale of the quote asset.
    """

    def __init__(self, settings: OrderSettings, base: ScaleSpec, quote: ScaleSpec) -> None:
        self._settings = settings
        self._base = base
        self._quote = quote

    @property
    def minimum_notional(self) -> Decimal:
        """Minimum order notional in quote display units."""
        return self._settings.quote_volume_step.scaleb(-self._quote.decimals)

    def accepts_price(self, price: Decimal | float | str) -> bool:
        """Return True if the price is usable and within the digit limit."""
        try:
            return price_within_digit_limit(price, self._settings.price_digits_limit)
        except QuantizerError as e:
            logger.debug("price_rejected", price=str(price), error=str(e))
            return False

    def volume_decimals(self, price: Decimal | float | str) -> int | None:
        """Fractional base digits allowed at this price, or None if the price is unusable."""
        try:
            return decimal_places_for_step(
                price,
                self._settings.quote_volume_step,
                self._base.decimals,
                self._quote.decimals,
            )
        except QuantizerError as e:
            logger.debug("volume_decimals_unavailable", price=str(price), error=str(e))
            return None

    def clean_volume_input(self, text: str, price: Decimal | float | str | None = None) -> str:
        """Truncate typed volume text to the digits allowed at ``price``.

        Without a usable price the base asset's own decimals are the limit.
        """
        places = self.volume_decimals(price) if price is not None else None
        if places is None:
            places = self._base.decimals
        return truncate_volume_input(text, places)

    def quantize(
        self, price: Decimal | float | str, amount: Decimal | float | str
    ) -> QuantizationResult | None:
        """Snap a base amount to the minimum-notional step, or None if the input is unusable."""
        try:
            return quantize(price, amount, self._base.decimals, self.minimum_notional)
        except QuantizerError as e:
            logger.debug("quantize_failed", price=str(price), amount=str(amount), error=str(e))
            return None

    def build_ticket(
        self,
        side: OrderSide,
        price: Decimal | float | str,
        amount: Decimal | float | str,
    ) -> OrderTicket | None:
        """Convert a form order to ledger units.

        Returns:
            OrderTicket, or None if the price is outside the digit limit, the
            input is unusable, the quantized volume is zero, or the quote
            notional is below ``quote_volume_minimum``.
        """
        if not self.accepts_price(price):
            return None

        result = self.quantize(price, amount)
        if result is None:
            return None

        try:
            volume_ledger = volume_to_ledger(result.quantized_volume, self._base.decimals)
            price_ledger = price_to_ledger(price, self._base.decimals, self._quote.decimals)
        except QuantizerError as e:
            logger.warning("ticket_conversion_failed", price=str(price), error=str(e))
            return None

        if volume_ledger == 0:
            logger.debug("ticket_below_step", amount=str(amount), step=result.step_size)
            return None

        notional = WIDE_CONTEXT.multiply(price_ledger, Decimal(volume_ledger))
        if notional < self._settings.quote_volume_minimum:
            logger.debug(
                "ticket_below_minimum_notional",
                notional=notional,
                minimum=self._settings.quote_volume_minimum,
            )
            return None

        return OrderTicket(side=side, price_ledger=price_ledger, volume_ledger=volume_ledger)

    @staticmethod
    def required_funds(ticket: OrderTicket) -> Decimal:
        """Balance locked by a ticket, in smallest units.

        A buy locks quote (price * volume); a sell locks the base volume.
        """
        if ticket.side == OrderSide.BUY:
            return WIDE_CONTEXT.multiply(ticket.price_ledger, Decimal(ticket.volume_ledger))
        return Decimal(ticket.volume_ledger)

    def has_sufficient_funds(
        self,
        ticket: OrderTicket,
        available: Decimal | int,
        released: Decimal | int = 0,
    ) -> bool:
        """Check that the ticket fits the available balance.

        Args:
            ticket: The order to place.
            available: Free balance of the locked asset, smallest units.
            released: Funds freed by the order this ticket replaces, if any.

        Returns:
            True if required funds <= available + released.
        """
        try:
            budget = as_decimal(available) + as_decimal(released)
        except QuantizerError as e:
            logger.warning("funds_check_failed", error=str(e))
            return False
        return self.required_funds(ticket) <= budget
