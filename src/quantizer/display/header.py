"""Header widget figures derived from a normalized trade history.

Price change compares the last two records; trailing volume sums the quote
volume of records inside ``[now - window_days, now]``. ``now`` is a
parameter so repeated calls over the same records are reproducible.

CRITICAL: All values use Decimal. Never use float for prices or volumes.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from quantizer.models import HeaderSummary, HistoryRecord
from quantizer.numeric import ZERO

_HUNDRED = Decimal("100")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken as UTC, the zone build_record stamps records in.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def summarize(
    records: Sequence[HistoryRecord],
    window_days: int,
    now: datetime | None = None,
) -> HeaderSummary:
    """Compute last price, price change and trailing volume.

    Args:
        records: History records sorted by timestamp ascending.
        window_days: Length of the trailing volume window in days.
        now: Reference time for the window. Defaults to the current UTC
            time. Naive datetimes, here or on records, are read as UTC.

    Returns:
        HeaderSummary. With no records every price field is None and the
        volume is 0; with one record only ``last_price`` is set; a previous
        price of 0 leaves ``change_percentage`` None.
    """
    now = _utcnow() if now is None else _as_utc(now)

    last_price = None
    change_absolute = None
    change_percentage = None

    if records:
        last_price = records[-1].price

    if len(records) >= 2:
        previous_price = records[-2].price
        change_absolute = last_price - previous_price
        # Avoid division by zero: no percentage against a zero price
        if previous_price != ZERO:
            change_percentage = change_absolute / previous_price * _HUNDRED

    window_start = now - timedelta(days=window_days)
    trailing_volume = sum(
        (r.volume_in_quote for r in records if window_start <= _as_utc(r.timestamp) <= now),
        ZERO,
    )

    return HeaderSummary(
        last_price=last_price,
        change_absolute=change_absolute,
        change_percentage=change_percentage,
        trailing_volume=trailing_volume,
    )
