"""Shared value types for the ledger quantizer.

CRITICAL: All derived amounts use Decimal and raw ledger amounts use int.
Never use float for prices, volumes or steps.

Records are frozen: a stage that adds information (e.g. display precision)
returns a replaced copy instead of mutating the input.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class OrderSide(str, Enum):
    """Order direction."""

    BUY = "buy"
    SELL = "sell"


class OrderKind(str, Enum):
    """Book side of a settled auction trade as reported by the ledger."""

    ASK = "ask"
    BID = "bid"


@dataclass(frozen=True)
class VolumeAmounts:
    """A ledger volume expressed in both display currencies."""

    volume_in_base: Decimal
    volume_in_quote: Decimal


@dataclass(frozen=True)
class QuantizationResult:
    """Outcome of fitting a requested base amount to the minimum-notional step grid."""

    step_size: Decimal
    decimal_places: int
    quantized_volume: Decimal
    volume_text: str  # quantized_volume rendered with fix_decimal
    step_overflow: bool = False  # step needs more digits than the base asset has


@dataclass(frozen=True)
class RawTrade:
    """One settled trade row from the ledger's transaction history query."""

    timestamp_ns: int  # Unix nanoseconds
    kind: OrderKind
    volume: int  # base smallest units
    price: Decimal  # quote smallest units per base smallest unit


@dataclass(frozen=True)
class HistoryRecord:
    """A trade converted to display units.

    The ``*_decimals`` fields are presentation metadata stamped by
    ``normalize``; they are None until the whole batch has been normalized.
    """

    price: Decimal
    volume_in_base: Decimal
    volume_in_quote: Decimal
    timestamp: datetime
    kind: OrderKind | None = None
    price_decimals: int | None = None
    volume_in_base_decimals: int | None = None
    volume_in_quote_decimals: int | None = None


@dataclass(frozen=True)
class HeaderSummary:
    """Summary figures for the header widget. Unset fields mean "not enough history"."""

    last_price: Decimal | None = None
    change_absolute: Decimal | None = None
    change_percentage: Decimal | None = None
    trailing_volume: Decimal = Decimal("0")


@dataclass(frozen=True)
class OrderTicket:
    """An order converted to ledger units, ready for submission."""

    side: OrderSide
    price_ledger: Decimal  # quote smallest units per base smallest unit
    volume_ledger: int  # base smallest units


@dataclass(frozen=True)
class IndicativeStats:
    """Indicative auction statistics in display units.

    Either the clearing pair is set (the book currently matches) or the
    min-ask / max-bid pair is (no match); unknown values are None.
    """

    clearing_price: Decimal | None = None
    clearing_volume: Decimal | None = None
    min_ask_price: Decimal | None = None
    max_bid_price: Decimal | None = None
    total_ask_volume: Decimal | None = None
    total_bid_volume: Decimal | None = None
