"""Ledger layer -- smallest-unit scales, token metadata and unit conversion."""

from quantizer.ledger.metadata import parse_token_metadata, scale_for
from quantizer.ledger.scale import (
    price_from_ledger,
    price_to_ledger,
    volume_from_ledger,
    volume_to_ledger,
)
from quantizer.ledger.types import (
    UNKNOWN_ASSET_DECIMALS,
    RawIndicativeStats,
    ScaleSpec,
    TokenMetadata,
)

__all__ = [
    "UNKNOWN_ASSET_DECIMALS",
    "RawIndicativeStats",
    "ScaleSpec",
    "TokenMetadata",
    "parse_token_metadata",
    "price_from_ledger",
    "price_to_ledger",
    "scale_for",
    "volume_from_ledger",
    "volume_to_ledger",
]
