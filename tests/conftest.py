"""Shared test fixtures for the ledger quantizer."""

from decimal import Decimal

import pytest

from quantizer.config import DisplaySettings, OrderSettings
from quantizer.ledger.types import ScaleSpec
from quantizer.orders.ticket import OrderEntry


@pytest.fixture
def base_scale() -> ScaleSpec:
    """8-decimal base asset (BTC-like)."""
    return ScaleSpec(decimals=8)


@pytest.fixture
def quote_scale() -> ScaleSpec:
    """6-decimal quote asset (USDC-like)."""
    return ScaleSpec(decimals=6)


@pytest.fixture
def order_settings() -> OrderSettings:
    """Order settings: 5-digit price limit, 1000-unit notional step, 5000-unit minimum."""
    return OrderSettings(
        price_digits_limit=5,
        quote_volume_step=Decimal("1000"),
        quote_volume_minimum=Decimal("5000"),
    )


@pytest.fixture
def display_settings() -> DisplaySettings:
    """Display settings with 2 extra significant digits and a 6-day header window."""
    return DisplaySettings(extra_significant_digits=2, header_window_days=6)


@pytest.fixture
def order_entry(
    order_settings: OrderSettings, base_scale: ScaleSpec, quote_scale: ScaleSpec
) -> OrderEntry:
    """OrderEntry for the 8/6-decimal pair."""
    return OrderEntry(order_settings, base_scale, quote_scale)
