"""Library defaults and environment-driven settings."""
from __future__ import annotations

import os
from types import MappingProxyType

DEFAULT_PRECISION = 2
DEFAULT_THOUSANDS_SEPARATOR = ","
DEFAULT_SYMBOL = ""
DEFAULT_CURRENCY_CODE = "USD"

KHR_SYMBOL = "\u17db"   # ៛
KHR_ROUNDING_UNIT = 100

# Widest fraction rendered; larger precisions are clamped.
MAX_PRECISION = 100

# Bias added before rounding so binary floats ending in .xx5 round up.
ROUNDING_EPSILON = 1e-14

DEBUG_ENV_VAR = "CURRENCY_FORMAT_DEBUG"

DEFAULT_OPTIONS = MappingProxyType({
    "trim": False,
    "currencyFormat": DEFAULT_CURRENCY_CODE,
    "thousandsSeparator": DEFAULT_THOUSANDS_SEPARATOR,
    "symbol": DEFAULT_SYMBOL,
})


def debug_enabled() -> bool:
    """True when CURRENCY_FORMAT_DEBUG is set to 1 or true."""
    return os.environ.get(DEBUG_ENV_VAR, "").lower() in ("true", "1")
