"""ICRC-1 token metadata parsing and scale resolution.

The ledger reports metadata as ``(key, value)`` pairs where the value is a
single-entry variant such as ``{"Text": "ckBTC"}`` or ``{"Nat": 8}``.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from quantizer.ledger.types import ScaleSpec, TokenMetadata
from quantizer.logging import get_logger

logger = get_logger(__name__)

_SYMBOL = "icrc1:symbol"
_NAME = "icrc1:name"
_DECIMALS = "icrc1:decimals"
_LOGO = "icrc1:logo"
_FEE = "icrc1:fee"

# Chain-key wrapped assets (ckBTC, ckETH) are displayed as the underlying asset.
_WRAPPED_PREFIX = "ck"


def parse_token_metadata(entries: Iterable[tuple[str, Mapping[str, Any]]]) -> TokenMetadata:
    """Build TokenMetadata from ICRC-1 metadata entries.

    Unrecognized keys are ignored; missing keys keep their defaults
    ("unknown" symbol and name, 0 decimals and fee, empty logo).

    Args:
        entries: ``(key, variant)`` pairs from ``icrc1_metadata``.

    Returns:
        Parsed TokenMetadata with any ``ck`` wrapper prefix removed.
    """
    symbol = "unknown"
    name = "unknown"
    decimals = 0
    fee = 0
    logo = ""

    for key, variant in entries:
        if key == _SYMBOL:
            symbol = str(variant["Text"])
        elif key == _NAME:
            name = str(variant["Text"])
        elif key == _DECIMALS:
            decimals = int(variant["Nat"])
        elif key == _LOGO:
            logo = str(variant["Text"])
        elif key == _FEE:
            fee = int(variant["Nat"])

    symbol = symbol.removeprefix(_WRAPPED_PREFIX)
    name = name.removeprefix(_WRAPPED_PREFIX)

    return TokenMetadata(symbol=symbol, name=name, decimals=decimals, fee=fee, logo=logo)


def scale_for(token: TokenMetadata | Mapping[str, Any] | None) -> ScaleSpec:
    """Resolve the ScaleSpec of a token.

    Anything without a non-negative integer ``decimals`` (None, a list, a
    mapping missing the key) falls back to ``ScaleSpec.unknown()`` so an
    unrecognized asset still renders.
    """
    if isinstance(token, TokenMetadata):
        decimals: Any = token.decimals
    elif isinstance(token, Mapping):
        decimals = token.get("decimals")
    else:
        decimals = None

    if isinstance(decimals, int) and not isinstance(decimals, bool) and decimals >= 0:
        return ScaleSpec(decimals=decimals)

    logger.debug("unknown_asset_scale", token=repr(token))
    return ScaleSpec.unknown()
