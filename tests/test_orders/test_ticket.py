"""Tests for the OrderEntry boundary.

Pair: 8-decimal base, 6-decimal quote, price limit 5 digits, notional step
1000 quote smallest units (0.001 quote), minimum notional 5000 (0.005 quote).
Invalid input must never raise.
"""

from decimal import Decimal

from quantizer.config import OrderSettings
from quantizer.ledger.types import ScaleSpec
from quantizer.models import OrderSide, OrderTicket
from quantizer.orders.ticket import OrderEntry


class TestPriceAndVolumeInput:
    """Test per-keystroke helpers."""

    def test_minimum_notional_in_display_units(self, order_entry: OrderEntry) -> None:
        """1000 quote smallest units at 6 decimals is 0.001."""
        assert order_entry.minimum_notional == Decimal("0.001")

    def test_accepts_price(self, order_entry: OrderEntry) -> None:
        """Digit limit applied; unusable text rejected without raising."""
        assert order_entry.accepts_price("123.45") is True
        assert order_entry.accepts_price("123.456") is False
        assert order_entry.accepts_price("abc") is False

    def test_volume_decimals(self, order_entry: OrderEntry) -> None:
        """Price 1.5 allows 4 decimals; zero price has no answer."""
        assert order_entry.volume_decimals(Decimal("1.5")) == 4
        assert order_entry.volume_decimals("0") is None

    def test_clean_volume_input_at_price(self, order_entry: OrderEntry) -> None:
        """Typed volume is cut to the 4 digits meaningful at 1.5."""
        assert order_entry.clean_volume_input("2.123456", Decimal("1.5")) == "2.1234"

    def test_clean_volume_input_without_price(self, order_entry: OrderEntry) -> None:
        """Without a usable price the base decimals (8) apply."""
        assert order_entry.clean_volume_input("2.123456789") == "2.12345678"
        assert order_entry.clean_volume_input("2.123456789", "abc") == "2.12345678"


class TestQuantize:
    """Test OrderEntry.quantize fail-soft behaviour."""

    def test_quantize(self, order_entry: OrderEntry) -> None:
        """Step 0.0001 at price 1.5."""
        result = order_entry.quantize(Decimal("1.5"), Decimal("2.123456"))
        assert result is not None
        assert result.volume_text == "2.1234"

    def test_zero_price_gives_none(self, order_entry: OrderEntry) -> None:
        """Zero price disables submission instead of raising."""
        assert order_entry.quantize(Decimal("0"), Decimal("1")) is None

    def test_garbage_amount_gives_none(self, order_entry: OrderEntry) -> None:
        """Unparseable amount gives None."""
        assert order_entry.quantize(Decimal("1.5"), "1.2.3") is None


class TestBuildTicket:
    """Test build_ticket conversion to ledger units."""

    def test_buy_ticket(self, order_entry: OrderEntry) -> None:
        """2.1234 BTC at 1.5 -> 212340000 sats at 0.015 per sat."""
        ticket = order_entry.build_ticket(OrderSide.BUY, Decimal("1.5"), Decimal("2.123456"))
        assert ticket == OrderTicket(
            side=OrderSide.BUY,
            price_ledger=Decimal("0.015"),
            volume_ledger=212_340_000,
        )

    def test_price_over_digit_limit(self, order_entry: OrderEntry) -> None:
        """Too many price digits -> no ticket."""
        assert order_entry.build_ticket(OrderSide.SELL, "123.456", "1") is None

    def test_amount_below_step(self, order_entry: OrderEntry) -> None:
        """0.00001 at step 0.0001 quantizes to zero -> no ticket."""
        assert order_entry.build_ticket(OrderSide.BUY, Decimal("1.5"), Decimal("0.00001")) is None

    def test_notional_at_minimum_accepted(self, order_entry: OrderEntry) -> None:
        """0.0025 BTC at 2: 250000 sats * 0.02 = 5000, exactly the minimum."""
        ticket = order_entry.build_ticket(OrderSide.BUY, Decimal("2"), Decimal("0.0025"))
        assert ticket == OrderTicket(
            side=OrderSide.BUY,
            price_ledger=Decimal("0.02"),
            volume_ledger=250_000,
        )

    def test_notional_below_minimum_rejected(self, order_entry: OrderEntry) -> None:
        """0.0024 BTC at 2: 240000 sats * 0.02 = 4800 < 5000 -> no ticket."""
        assert order_entry.build_ticket(OrderSide.BUY, Decimal("2"), Decimal("0.0024")) is None

    def test_minimum_applies_to_sells(self, order_entry: OrderEntry) -> None:
        """The minimum is on quote notional whichever side is placed."""
        assert order_entry.build_ticket(OrderSide.SELL, Decimal("2"), Decimal("0.0024")) is None
        assert order_entry.build_ticket(OrderSide.SELL, Decimal("2"), Decimal("0.0025")) is not None

    def test_zero_price(self, order_entry: OrderEntry) -> None:
        """Zero price passes the digit check but cannot be quantized."""
        assert order_entry.build_ticket(OrderSide.BUY, Decimal("0"), Decimal("1")) is None

    def test_unknown_base_asset(self, order_settings: OrderSettings, quote_scale: ScaleSpec) -> None:
        """An unknown base asset still produces a ticket at 20 decimals."""
        entry = OrderEntry(order_settings, ScaleSpec.unknown(), quote_scale)
        ticket = entry.build_ticket(OrderSide.SELL, Decimal("2"), Decimal("1"))
        assert ticket is not None
        assert ticket.volume_ledger == 10**20


class TestFunds:
    """Test required_funds and has_sufficient_funds."""

    def test_buy_locks_quote(self, order_entry: OrderEntry) -> None:
        """0.015 * 212340000 = 3185100 quote smallest units (3.1851 USDC)."""
        ticket = OrderTicket(OrderSide.BUY, Decimal("0.015"), 212_340_000)
        assert OrderEntry.required_funds(ticket) == Decimal("3185100")

    def test_sell_locks_base(self, order_entry: OrderEntry) -> None:
        """A sell locks its base volume."""
        ticket = OrderTicket(OrderSide.SELL, Decimal("0.015"), 212_340_000)
        assert OrderEntry.required_funds(ticket) == Decimal("212340000")

    def test_sufficient_funds_boundary(self, order_entry: OrderEntry) -> None:
        """Exactly enough passes; one unit short fails."""
        ticket = OrderTicket(OrderSide.BUY, Decimal("0.015"), 212_340_000)
        assert order_entry.has_sufficient_funds(ticket, 3_185_100) is True
        assert order_entry.has_sufficient_funds(ticket, 3_185_099) is False

    def test_replaced_order_releases_funds(self, order_entry: OrderEntry) -> None:
        """Funds of the order being replaced count toward the budget."""
        ticket = OrderTicket(OrderSide.BUY, Decimal("0.015"), 212_340_000)
        assert order_entry.has_sufficient_funds(ticket, 3_185_099, released=1) is True

    def test_garbage_balance(self, order_entry: OrderEntry) -> None:
        """An unusable balance fails the check without raising."""
        ticket = OrderTicket(OrderSide.SELL, Decimal("0.015"), 1)
        assert order_entry.has_sufficient_funds(ticket, "n/a") is False  # type: ignore[arg-type]
