"""Trade history conversion for the history table and header widget.

Flow:
1. Each RawTrade is converted to display units (price, base and quote volume)
2. The whole batch is normalized so every column shares one precision
3. The header summary is derived from the normalized records
"""

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone

from quantizer.config import DisplaySettings
from quantizer.display.header import summarize
from quantizer.display.precision import normalize
from quantizer.exceptions import QuantizerError
from quantizer.ledger.scale import price_from_ledger, volume_from_ledger
from quantizer.ledger.types import ScaleSpec
from quantizer.logging import get_logger
from quantizer.models import HeaderSummary, HistoryRecord, RawTrade

logger = get_logger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _timestamp(timestamp_ns: int) -> datetime:
    # Integer microseconds keep nanosecond ledger stamps exact to the microsecond.
    return _EPOCH + timedelta(microseconds=timestamp_ns // 1_000)


def build_record(row: RawTrade, base: ScaleSpec, quote: ScaleSpec) -> HistoryRecord:
    """Convert one ledger trade row to a HistoryRecord without display precision."""
    price = price_from_ledger(row.price, base.decimals, quote.decimals)
    volumes = volume_from_ledger(row.volume, base.decimals, price)
    return HistoryRecord(
        price=price,
        volume_in_base=volumes.volume_in_base,
        volume_in_quote=volumes.volume_in_quote,
        timestamp=_timestamp(row.timestamp_ns),
        kind=row.kind,
    )


def build_history(
    rows: Iterable[RawTrade],
    base: ScaleSpec,
    quote: ScaleSpec,
    extra_significant_digits: int,
) -> list[HistoryRecord]:
    """Convert ledger rows and normalize their display precision as one batch.

    Raises:
        QuantizerError: If any row cannot be converted.
    """
    records = [build_record(row, base, quote) for row in rows]
    return normalize(records, extra_significant_digits)


class HistoryTable:
    """Builds the trade history table and its header figures.

    Rows that fail conversion are skipped and logged rather than failing the
    whole table.

    Args:
        settings: Display settings (extra significant digits, header window).
    """

    def __init__(self, settings: DisplaySettings) -> None:
        self._settings = settings

    def build(self, rows: Iterable[RawTrade], base: ScaleSpec, quote: ScaleSpec) -> list[HistoryRecord]:
        """Convert and normalize a history batch, skipping unconvertible rows.

        Args:
            rows: Raw ledger rows, in any order.
            base: Scale of the traded asset.
            quote: Scale of the quote asset.

        Returns:
            Normalized records sorted by timestamp ascending.
        """
        records: list[HistoryRecord] = []
        skipped = 0
        for row in rows:
            try:
                records.append(build_record(row, base, quote))
            except QuantizerError as e:
                skipped += 1
                logger.warning(
                    "history_row_skipped",
                    timestamp_ns=row.timestamp_ns,
                    error=str(e),
                )

        records.sort(key=lambda r: r.timestamp)
        normalized = normalize(records, self._settings.extra_significant_digits)

        logger.debug(
            "history_built",
            records=len(normalized),
            skipped=skipped,
            base_known=base.known,
            quote_known=quote.known,
        )
        return normalized

    def header(self, records: Sequence[HistoryRecord], now: datetime | None = None) -> HeaderSummary:
        """Summarize records over the configured trailing window."""
        return summarize(records, self._settings.header_window_days, now=now)
