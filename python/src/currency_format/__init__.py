"""currency-format: render numeric amounts as currency strings."""
from .batch import CurrencyFormat, get_default_options
from .config import DEFAULT_OPTIONS, KHR_SYMBOL
from .errors import CurrencyFormatError, RegistrationError
from .format import format_currency, normalize_amount
from .registration import register, unregister
from .types import (
    BatchItem,
    CurrencyCode,
    CurrencyFormatOptions,
    FormatOptions,
    FormatRequest,
    FormattedResult,
    parse_batch_item,
    parse_currency_options,
    parse_format_options,
    parse_format_request,
)

default_options = CurrencyFormat.default_options

__all__ = [
    "CurrencyFormat",
    "format_currency",
    "normalize_amount",
    "get_default_options",
    "default_options",
    "DEFAULT_OPTIONS",
    "KHR_SYMBOL",
    "register",
    "unregister",
    "CurrencyFormatError",
    "RegistrationError",
    "BatchItem",
    "CurrencyCode",
    "CurrencyFormatOptions",
    "FormatOptions",
    "FormatRequest",
    "FormattedResult",
    "parse_batch_item",
    "parse_currency_options",
    "parse_format_options",
    "parse_format_request",
]
