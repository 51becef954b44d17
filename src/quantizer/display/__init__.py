"""Display layer -- history records, shared column precision and header figures."""

from quantizer.display.formatting import fix_decimal, to_plain_string
from quantizer.display.header import summarize
from quantizer.display.history import HistoryTable, build_history, build_record
from quantizer.display.precision import normalize, significant_decimal_places
from quantizer.display.stats import convert_indicative_stats

__all__ = [
    "HistoryTable",
    "build_history",
    "build_record",
    "convert_indicative_stats",
    "fix_decimal",
    "normalize",
    "significant_decimal_places",
    "summarize",
    "to_plain_string",
]
