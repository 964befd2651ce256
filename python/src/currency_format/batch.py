"""Batch formatting: format a list of values, each with its own options."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .config import DEFAULT_PRECISION
from .format import format_currency
from .types import (
    BatchItem,
    CurrencyFormatOptions,
    FormatRequest,
    FormattedResult,
    parse_batch_item,
)


class CurrencyFormat:
    """Formats stored values as currency.

    Example::

        formatter = CurrencyFormat([
            {"origin": "140", "options": {"currencyFormat": "USD", "symbol": "$"}},
        ])
        formatter.currency()[0].formatted
        # '$140.00'

    Args:
        values: BatchItem instances or ``{"origin", "options"}`` dicts.
            Stored as a tuple; the list passed in is not kept. Dicts are
            parsed on the way in, so results carry a CurrencyFormatOptions
            rather than the caller's dict: keys left out come back as None
            and unknown keys are dropped.
    """

    default_options = CurrencyFormatOptions()

    # Single-value entry point, shared with the module-level function.
    format = staticmethod(format_currency)

    def __init__(self, values: Iterable[BatchItem | Mapping[str, Any]] | None = None):
        self._values: tuple[BatchItem, ...] = tuple(
            parse_batch_item(value) for value in (values or ())
        )

    @property
    def values(self) -> tuple[BatchItem, ...]:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[BatchItem]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"CurrencyFormat({list(self._values)!r})"

    @staticmethod
    def get_default_options() -> CurrencyFormatOptions:
        """Return the library defaults (a frozen snapshot)."""
        return CurrencyFormat.default_options

    def currency(self) -> list[FormattedResult]:
        """Format every stored value at two decimal places, in stored order."""
        return [
            FormattedResult(
                origin=item.origin,
                options=item.options,
                formatted=format_currency(FormatRequest(
                    value=item.origin,
                    options=item.options.to_format_options(DEFAULT_PRECISION),
                )),
            )
            for item in self._values
        ]


def get_default_options() -> CurrencyFormatOptions:
    """Return the library defaults (a frozen snapshot)."""
    return CurrencyFormat.get_default_options()
