"""Tests for ICRC-1 metadata parsing and scale resolution."""

import pytest

from quantizer.exceptions import InvalidInput
from quantizer.ledger.metadata import parse_token_metadata, scale_for
from quantizer.ledger.types import UNKNOWN_ASSET_DECIMALS, ScaleSpec, TokenMetadata


class TestParseTokenMetadata:
    """Test parse_token_metadata over ledger metadata entries."""

    def test_full_metadata(self) -> None:
        """All known keys are read; the ck wrapper prefix is stripped."""
        entries = [
            ("icrc1:symbol", {"Text": "ckBTC"}),
            ("icrc1:name", {"Text": "ckBTC"}),
            ("icrc1:decimals", {"Nat": 8}),
            ("icrc1:fee", {"Nat": 10}),
            ("icrc1:logo", {"Text": "data:image/svg+xml;base64,AAAA"}),
        ]
        token = parse_token_metadata(entries)
        assert token == TokenMetadata(
            symbol="BTC",
            name="BTC",
            decimals=8,
            fee=10,
            logo="data:image/svg+xml;base64,AAAA",
        )

    def test_unwrapped_symbol_kept(self) -> None:
        """Symbols without the ck prefix are not altered."""
        token = parse_token_metadata(
            [("icrc1:symbol", {"Text": "ICP"}), ("icrc1:name", {"Text": "Internet Computer"})]
        )
        assert token.symbol == "ICP"
        assert token.name == "Internet Computer"

    def test_inner_ck_kept(self) -> None:
        """Only a leading ck is a wrapper prefix; LUCKY keeps its letters."""
        token = parse_token_metadata(
            [("icrc1:symbol", {"Text": "LUCKY"}), ("icrc1:name", {"Text": "Lucky Duck"})]
        )
        assert token.symbol == "LUCKY"
        assert token.name == "Lucky Duck"

    def test_prefix_stripped_once(self) -> None:
        """ckckX loses only the first wrapper prefix."""
        token = parse_token_metadata([("icrc1:symbol", {"Text": "ckckX"})])
        assert token.symbol == "ckX"

    def test_nat_as_string(self) -> None:
        """Nat values delivered as text are parsed as integers."""
        token = parse_token_metadata([("icrc1:decimals", {"Nat": "6"})])
        assert token.decimals == 6

    def test_empty_metadata_uses_defaults(self) -> None:
        """No entries gives the unknown defaults."""
        assert parse_token_metadata([]) == TokenMetadata()

    def test_unrecognized_keys_ignored(self) -> None:
        """Vendor-specific keys do not break parsing."""
        token = parse_token_metadata([("icrc1:max_memo_length", {"Nat": 32})])
        assert token == TokenMetadata()


class TestScaleFor:
    """Test scale_for fallback to the unknown-asset scale."""

    def test_token_metadata(self) -> None:
        """TokenMetadata decimals are used as-is."""
        assert scale_for(TokenMetadata(decimals=8)) == ScaleSpec(decimals=8)

    def test_mapping(self) -> None:
        """A mapping with integer decimals is accepted."""
        assert scale_for({"decimals": 6}) == ScaleSpec(decimals=6)

    def test_none_is_unknown(self) -> None:
        """Missing token falls back to the 20-decimal sentinel."""
        scale = scale_for(None)
        assert scale == ScaleSpec.unknown()
        assert scale.decimals == UNKNOWN_ASSET_DECIMALS == 20
        assert scale.known is False

    def test_list_is_unknown(self) -> None:
        """A multi-select list is not a token."""
        assert scale_for([]) == ScaleSpec.unknown()  # type: ignore[arg-type]

    def test_non_integer_decimals_is_unknown(self) -> None:
        """Decimals given as text are not trusted."""
        assert scale_for({"decimals": "8"}) == ScaleSpec.unknown()

    def test_missing_decimals_is_unknown(self) -> None:
        """A mapping without decimals falls back."""
        assert scale_for({"symbol": "XYZ"}) == ScaleSpec.unknown()


class TestScaleSpec:
    """Test ScaleSpec construction."""

    def test_negative_decimals_rejected(self) -> None:
        """Negative decimals raise InvalidInput."""
        with pytest.raises(InvalidInput):
            ScaleSpec(decimals=-1)

    def test_known_by_default(self) -> None:
        """Explicit scales are known assets."""
        assert ScaleSpec(decimals=0).known is True
