"""Error classes for currency-format."""
from __future__ import annotations


class CurrencyFormatError(Exception):
    """Base error for currency-format operations.

    Formatting itself never raises; bad amounts render as zero.
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class RegistrationError(CurrencyFormatError):
    """Raised when the formatter cannot be attached to a host object."""

    def __init__(self, message: str, host: object = None):
        super().__init__("REGISTRATION_FAILED", message)
        self.host = host
