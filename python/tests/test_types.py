"""Unit tests for currency_format.types parsing and option records."""
from __future__ import annotations

from currency_format.types import (
    BatchItem,
    CurrencyCode,
    CurrencyFormatOptions,
    FormatOptions,
    FormatRequest,
    parse_batch_item,
    parse_currency_options,
    parse_format_options,
    parse_format_request,
)


class TestCurrencyCode:
    def test_known_codes(self):
        assert CurrencyCode.lookup("KHR") is CurrencyCode.KHR
        assert CurrencyCode.lookup("USD") is CurrencyCode.USD

    def test_member_passes_through(self):
        assert CurrencyCode.lookup(CurrencyCode.KHR) is CurrencyCode.KHR

    def test_unknown_codes(self):
        assert CurrencyCode.lookup("EUR") is None
        assert CurrencyCode.lookup("khr") is None
        assert CurrencyCode.lookup(None) is None

    def test_members_compare_as_strings(self):
        assert CurrencyCode.KHR == "KHR"


class TestParseFormatOptions:
    def test_defaults(self):
        assert parse_format_options(None) == FormatOptions()
        assert parse_format_options({}) == FormatOptions(
            precision=2, thousands_separator=",", symbol="", currency_code="USD"
        )

    def test_camel_case(self):
        options = parse_format_options({
            "precision": 3,
            "thousandsSeparator": ".",
            "symbol": "€",
            "currencyCode": "EUR",
        })
        assert options == FormatOptions(3, ".", "€", "EUR")

    def test_snake_case(self):
        options = parse_format_options({"thousands_separator": "", "currency_code": "KHR"})
        assert options.thousands_separator == ""
        assert options.currency_code == "KHR"

    def test_legacy_format_alias(self):
        assert parse_format_options({"format": "KHR"}).currency_code == "KHR"

    def test_none_values_fall_back_independently(self):
        options = parse_format_options({"precision": None, "symbol": "$", "thousandsSeparator": None})
        assert options == FormatOptions(symbol="$")

    def test_instance_passes_through(self):
        options = FormatOptions(symbol="$")
        assert parse_format_options(options) is options

    def test_precision_kept_as_given(self):
        assert parse_format_options({"precision": "two"}).precision == "two"

    def test_with_defaults_fills_none_fields(self):
        options = FormatOptions(precision=None, thousands_separator=None, symbol="$", currency_code=None)
        assert options.with_defaults() == FormatOptions(symbol="$")

    def test_with_defaults_keeps_empty_separator(self):
        assert FormatOptions(thousands_separator="").with_defaults().thousands_separator == ""


class TestParseCurrencyOptions:
    def test_absent_keys_stay_none(self):
        options = parse_currency_options({"symbol": "$"})
        assert options == CurrencyFormatOptions(
            trim=False, currency_code=None, thousands_separator=None, symbol="$"
        )

    def test_currency_format_alias(self):
        options = parse_currency_options({"trim": True, "currencyFormat": "KHR"})
        assert options.trim is True
        assert options.currency_code == "KHR"

    def test_to_format_options_fills_defaults(self):
        options = parse_currency_options({}).to_format_options()
        assert options == FormatOptions()

    def test_to_format_options_keeps_empty_separator(self):
        options = CurrencyFormatOptions(thousands_separator="").to_format_options()
        assert options.thousands_separator == ""


class TestParseRequests:
    def test_format_request(self):
        request = parse_format_request({"value": "12", "options": {"symbol": "$"}})
        assert request == FormatRequest("12", FormatOptions(symbol="$"))

    def test_batch_item(self):
        item = parse_batch_item({"origin": 5, "options": {"currencyFormat": "USD"}})
        assert item == BatchItem(5, CurrencyFormatOptions(
            currency_code="USD", thousands_separator=None, symbol=None
        ))

    def test_batch_item_instance_passes_through(self):
        item = BatchItem(5)
        assert parse_batch_item(item) is item
