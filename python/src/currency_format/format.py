"""Currency formatting: the single implementation behind every public entry point.

Rules:
1. Normalize the value to a finite float. Strings keep only ASCII digits,
   ``.`` and ``-`` and parse their longest numeric prefix. Anything that
   does not parse renders as zero; nothing is raised.
2. KHR amounts round to the nearest 100 first.
3. Add a 1e-14 bias for binary float error, then round to ``precision``
   decimals with ties toward positive infinity.
4. Group the integer part with the thousands separator, if any.
5. Prefix the symbol, except the riel sign with KHR, which is suffixed.
"""
from __future__ import annotations

import math
import numbers
import re
import sys
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .config import (
    DEFAULT_PRECISION,
    KHR_ROUNDING_UNIT,
    KHR_SYMBOL,
    MAX_PRECISION,
    ROUNDING_EPSILON,
    debug_enabled,
)
from .types import CurrencyCode, FormatRequest, parse_format_request

_NOT_NUMERIC = re.compile(r"[^0-9.\-]")
_NUMERIC_PREFIX = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

# Floats at or above this magnitude have no fractional part.
_EXACT_INTEGER_LIMIT = 2.0 ** 52


def format_currency(request: FormatRequest | Mapping[str, Any]) -> str:
    """Format ``request.value`` as a currency string.

    Example::

        format_currency(FormatRequest(
            1234.56,
            FormatOptions(symbol="$", currency_code="USD"),
        ))
        # '$1,234.56'
    """
    request = parse_format_request(request)
    options = request.options.with_defaults()

    amount = normalize_amount(request.value)
    amount = _pre_round(amount, options.currency_code)
    precision = _clamp_precision(options.precision)

    sign, integer_digits, fraction_digits = _to_fixed(amount, precision)
    if options.thousands_separator:
        integer_digits = group_thousands(integer_digits, options.thousands_separator)

    number = sign + integer_digits
    if fraction_digits:
        number += "." + fraction_digits

    if (
        CurrencyCode.lookup(options.currency_code) is CurrencyCode.KHR
        and options.symbol == KHR_SYMBOL
    ):
        return number + options.symbol
    return options.symbol + number


def normalize_amount(value: Any) -> float:
    """Coerce ``value`` to a finite float, falling back to 0.0."""
    if isinstance(value, bool):
        _warn("unsupported_type", value)
        return 0.0

    if isinstance(value, (numbers.Real, Decimal)):
        try:
            amount = float(value)
        except OverflowError:
            amount = math.inf
        if not math.isfinite(amount):
            _warn("non_finite", value)
            return 0.0
        return amount

    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(_NOT_NUMERIC.sub("", value))
        if match is None:
            _warn("unparseable", value)
            return 0.0
        amount = float(match.group())
        if not math.isfinite(amount):
            _warn("non_finite", value)
            return 0.0
        return amount

    _warn("unsupported_type", value)
    return 0.0


def group_thousands(digits: str, separator: str) -> str:
    """Insert ``separator`` every three digits, counting from the right."""
    return f"{int(digits):,}".replace(",", separator)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    whole = math.floor(value)
    if value - whole >= 0.5:
        whole += 1
    return whole


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _pre_round(amount: float, currency_code: Any) -> float:
    code = CurrencyCode.lookup(currency_code)
    if code is CurrencyCode.KHR:
        return float(round_half_away(amount / KHR_ROUNDING_UNIT) * KHR_ROUNDING_UNIT)
    return amount


def _clamp_precision(precision: Any) -> int:
    try:
        precision = DEFAULT_PRECISION if precision is None else int(precision)
    except (TypeError, ValueError, OverflowError):
        _warn("invalid_precision", precision)
        return DEFAULT_PRECISION
    if precision < 0:
        _warn("negative_precision", precision)
        return 0
    if precision > MAX_PRECISION:
        _warn("precision_too_large", precision)
        return MAX_PRECISION
    return precision


def _to_fixed(amount: float, precision: int) -> tuple[str, str, str]:
    """Split ``amount`` rounded to ``precision`` into sign, integer and fraction digits."""
    factor = 10 ** precision
    if abs(amount) >= _EXACT_INTEGER_LIMIT:
        scaled = int(amount) * factor
    else:
        scaled = round_half_up((amount + ROUNDING_EPSILON) * factor)

    digits = str(abs(scaled)).rjust(precision + 1, "0")
    sign = "-" if scaled < 0 else ""
    if precision == 0:
        return sign, digits, ""
    return sign, digits[:-precision], digits[-precision:]


def _warn(reason: str, value: Any) -> None:
    """Emit CURRENCY_FORMAT_WARN to stderr when CURRENCY_FORMAT_DEBUG is on."""
    if not debug_enabled():
        return
    print(
        f"CURRENCY_FORMAT_WARN reason={reason} value={value!r}",
        file=sys.stderr,
    )
