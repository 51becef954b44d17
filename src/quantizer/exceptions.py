"""Custom exceptions for the ledger quantizer.

All conversion and quantization exceptions live here so the order-entry
and display boundaries can catch a single base class.
"""


class QuantizerError(Exception):
    """Base exception for all quantizer errors."""


class InvalidPrice(QuantizerError):
    """Raised when a zero, negative or non-finite price is used where a positive price is required."""


class InvalidInput(QuantizerError):
    """Raised when an amount, step or decimals count cannot be used for conversion."""
