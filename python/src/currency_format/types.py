"""Dataclasses for currency-format options, requests and results."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .config import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_PRECISION,
    DEFAULT_SYMBOL,
    DEFAULT_THOUSANDS_SEPARATOR,
)

Amount = Union[int, float, str]


class CurrencyCode(str, Enum):
    """Currency codes with their own rounding or placement rules.

    Any other uppercase code is accepted as a plain string and follows
    the default rules.
    """
    USD = "USD"
    KHR = "KHR"

    @classmethod
    def lookup(cls, code: Any) -> CurrencyCode | None:
        """Return the known member for ``code``, or None if unrecognized."""
        if isinstance(code, cls):
            return code
        try:
            return cls(str(code))
        except ValueError:
            return None


@dataclass(frozen=True)
class FormatOptions:
    """Options for a single format call."""
    precision: int = DEFAULT_PRECISION
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR
    symbol: str = DEFAULT_SYMBOL
    currency_code: str = DEFAULT_CURRENCY_CODE

    def with_defaults(self) -> FormatOptions:
        """Return a copy with every None field replaced by its default."""
        return FormatOptions(
            precision=_or_default(self.precision, DEFAULT_PRECISION),
            thousands_separator=_or_default(
                self.thousands_separator, DEFAULT_THOUSANDS_SEPARATOR
            ),
            symbol=_or_default(self.symbol, DEFAULT_SYMBOL),
            currency_code=_or_default(self.currency_code, DEFAULT_CURRENCY_CODE),
        )


@dataclass(frozen=True)
class FormatRequest:
    """A value to format paired with its options."""
    value: Amount
    options: FormatOptions = field(default_factory=FormatOptions)


@dataclass(frozen=True)
class CurrencyFormatOptions:
    """Per-item options for batch formatting.

    ``None`` in a field means the caller left it out; the formatter
    default applies. ``trim`` is carried for interface compatibility and
    is not read when formatting.
    """
    trim: bool = False
    currency_code: str | None = DEFAULT_CURRENCY_CODE
    thousands_separator: str | None = DEFAULT_THOUSANDS_SEPARATOR
    symbol: str | None = DEFAULT_SYMBOL

    def to_format_options(self, precision: int = DEFAULT_PRECISION) -> FormatOptions:
        return FormatOptions(
            precision=precision,
            thousands_separator=_or_default(
                self.thousands_separator, DEFAULT_THOUSANDS_SEPARATOR
            ),
            symbol=_or_default(self.symbol, DEFAULT_SYMBOL),
            currency_code=_or_default(self.currency_code, DEFAULT_CURRENCY_CODE),
        )

    def to_dict(self) -> dict[str, Any]:
        """Camel-case dict in the shape JSON callers send."""
        return {
            "trim": self.trim,
            "currencyFormat": self.currency_code,
            "thousandsSeparator": self.thousands_separator,
            "symbol": self.symbol,
        }


@dataclass(frozen=True)
class BatchItem:
    """One stored entry of a batch: the original value and its options."""
    origin: Amount
    options: CurrencyFormatOptions = field(default_factory=CurrencyFormatOptions)


@dataclass(frozen=True)
class FormattedResult:
    """A batch item plus its formatted string."""
    origin: Amount
    options: CurrencyFormatOptions
    formatted: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "origin": self.origin,
            "options": self.options.to_dict(),
            "formatted": self.formatted,
        }


# ---------------------------------------------------------------------------
# Dict parsing
# ---------------------------------------------------------------------------


def parse_format_options(raw: Mapping[str, Any] | FormatOptions | None) -> FormatOptions:
    """Parse a camelCase (or snake_case) options mapping into FormatOptions.

    Missing keys and None values fall back to the defaults. ``format`` is
    accepted as a legacy alias for ``currencyCode``. ``precision`` is kept
    as given; the formatter coerces it and falls back to the default when
    it is not an integer.
    """
    if isinstance(raw, FormatOptions):
        return raw
    raw = raw or {}
    return FormatOptions(
        precision=_or_default(_first(raw, "precision"), DEFAULT_PRECISION),
        thousands_separator=_or_default(
            _first(raw, "thousandsSeparator", "thousands_separator"),
            DEFAULT_THOUSANDS_SEPARATOR,
        ),
        symbol=_or_default(_first(raw, "symbol"), DEFAULT_SYMBOL),
        currency_code=_or_default(
            _first(raw, "currencyCode", "currency_code", "format"),
            DEFAULT_CURRENCY_CODE,
        ),
    )


def parse_currency_options(
    raw: Mapping[str, Any] | CurrencyFormatOptions | None,
) -> CurrencyFormatOptions:
    """Parse per-item batch options.

    Absent keys stay None so the formatter default applies later, matching
    how a partially filled options object behaves.
    """
    if isinstance(raw, CurrencyFormatOptions):
        return raw
    raw = raw or {}
    return CurrencyFormatOptions(
        trim=bool(raw.get("trim", False)),
        currency_code=_first(raw, "currencyCode", "currency_code", "currencyFormat"),
        thousands_separator=_first(raw, "thousandsSeparator", "thousands_separator"),
        symbol=_first(raw, "symbol"),
    )


def parse_format_request(raw: Mapping[str, Any] | FormatRequest) -> FormatRequest:
    """Parse ``{"value": ..., "options": {...}}`` into a FormatRequest."""
    if isinstance(raw, FormatRequest):
        return raw
    return FormatRequest(
        value=raw.get("value"),
        options=parse_format_options(raw.get("options")),
    )


def parse_batch_item(raw: Mapping[str, Any] | BatchItem) -> BatchItem:
    """Parse ``{"origin": ..., "options": {...}}`` into a BatchItem."""
    if isinstance(raw, BatchItem):
        return raw
    return BatchItem(
        origin=raw.get("origin"),
        options=parse_currency_options(raw.get("options")),
    )


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value
