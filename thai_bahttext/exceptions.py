"""
Custom exception hierarchy for Bahttext conversion and configuration.

Each exception carries a machine-readable code so the API layer can report
failures without string matching.
"""

from __future__ import annotations


class BahtTextError(Exception):
    """Base exception for all Bahttext failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidAmountError(BahtTextError, ValueError):
    """The amount is not a number (bool, None, garbage string, ...)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_AMOUNT", message, details)


class NonFiniteAmountError(BahtTextError, ValueError):
    """NaN and infinities have no spoken form."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NON_FINITE_AMOUNT", message, details)


class ConfigurationError(BahtTextError):
    """An environment setting has an unusable value."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_CONFIGURATION", message, details)


class AmountOutOfRangeError(BahtTextError, ValueError):
    """The amount is too large to read out."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("AMOUNT_OUT_OF_RANGE", message, details)
