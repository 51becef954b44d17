"""Ledger-side type definitions: asset scales, token metadata and raw statistics.

Raw ledger amounts are int (smallest units); auction prices are Decimal.
"""

from dataclasses import dataclass
from decimal import Decimal

from quantizer.exceptions import InvalidInput

# Decimals assumed for an asset whose metadata is missing or unreadable.
# Wide enough to display anything, so an unknown asset never breaks a view.
UNKNOWN_ASSET_DECIMALS = 20


@dataclass(frozen=True)
class ScaleSpec:
    """Number of fractional digits an asset's smallest unit represents.

    ``known`` is False for the fallback variant built by ``unknown()``.
    """

    decimals: int
    known: bool = True

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise InvalidInput(f"decimals must be >= 0, got {self.decimals}")

    @classmethod
    def unknown(cls) -> "ScaleSpec":
        """Return the display-only scale used for unrecognized assets."""
        return cls(decimals=UNKNOWN_ASSET_DECIMALS, known=False)


@dataclass(frozen=True)
class TokenMetadata:
    """ICRC-1 token metadata relevant to display and scaling."""

    symbol: str = "unknown"
    name: str = "unknown"
    decimals: int = 0
    fee: int = 0  # transfer fee, smallest units
    logo: str = ""


@dataclass(frozen=True)
class RawIndicativeStats:
    """Indicative auction statistics as returned by the ledger, in smallest units.

    A matching book reports ``clearing_price``/``clearing_volume``; a book
    without a match reports ``min_ask_price``/``max_bid_price`` instead.
    """

    clearing_price: Decimal | None = None
    clearing_volume: int | None = None
    min_ask_price: Decimal | None = None
    max_bid_price: Decimal | None = None
    total_ask_volume: int | None = None
    total_bid_volume: int | None = None
