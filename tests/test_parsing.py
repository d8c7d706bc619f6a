"""
Unit tests for value parsing helpers.
"""
import pytest
from datetime import datetime, timezone

from tradevault.search.parsing import (
    format_amount,
    format_timestamp,
    parse_money,
    parse_timestamp,
    timestamp_or_zero,
    to_utc_naive,
)


class TestParseMoney:

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [
        ("$45,000", 45000.0),
        ("$350,000", 350000.0),
        ("AED 1,250.75", 1250.75),
        ("12.5%", 12.5),
        ("-$300", -300.0),
    ])
    def test_strips_currency_formatting(self, value, expected):
        assert parse_money(value) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", "n/a", "$", "--", None])
    def test_malformed_values_parse_to_zero(self, value):
        assert parse_money(value) == 0.0

    @pytest.mark.unit
    def test_numbers_pass_through(self):
        assert parse_money(50000) == 50000.0
        assert parse_money(12.5) == 12.5

    @pytest.mark.unit
    def test_takes_leading_number_when_several_dots(self):
        """Mirrors parseFloat-style leniency: '1.2.3' -> 1.2."""
        assert parse_money("1.2.3") == 1.2


class TestTimestamps:

    @pytest.mark.unit
    def test_parses_zulu_suffix(self):
        parsed = parse_timestamp("2024-01-15T10:00:00Z")
        assert parsed == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_naive_values_are_utc(self):
        assert parse_timestamp("2024-01-15") == datetime(2024, 1, 15, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_offsets_are_respected(self):
        dubai = parse_timestamp("2024-01-15T14:00:00+04:00")
        assert dubai == parse_timestamp("2024-01-15T10:00:00Z")

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", None, "yesterday", "2024-13-45"])
    def test_invalid_values_return_none(self, value):
        assert parse_timestamp(value) is None

    @pytest.mark.unit
    def test_timestamp_or_zero(self):
        assert timestamp_or_zero("1970-01-01T00:00:10Z") == 10.0
        assert timestamp_or_zero("garbage") == 0.0

    @pytest.mark.unit
    def test_format_round_trips_storage_value(self):
        stored = to_utc_naive("2024-01-15T14:00:00+04:00")
        assert stored == datetime(2024, 1, 15, 10, 0)
        assert format_timestamp(stored) == "2024-01-15T10:00:00Z"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [
        "2024-01-15T10:00:00.100Z",
        "2024-01-15T10:00:00.900Z",
        "2024-01-15T10:00:00.123456Z",
    ])
    def test_format_keeps_fractional_seconds(self, value):
        assert format_timestamp(to_utc_naive(value)) == value

    @pytest.mark.unit
    def test_format_aware_value_with_milliseconds(self):
        dubai = parse_timestamp("2024-01-15T14:00:00.250+04:00")
        assert format_timestamp(dubai) == "2024-01-15T10:00:00.250Z"

    @pytest.mark.unit
    def test_to_utc_naive_rejects_garbage(self):
        with pytest.raises(ValueError):
            to_utc_naive("not a date")


class TestFormatAmount:

    @pytest.mark.unit
    def test_whole_amounts(self):
        assert format_amount(50000) == "50,000"
        assert format_amount(75000.0) == "75,000"

    @pytest.mark.unit
    def test_fractional_amounts(self):
        assert format_amount(1234.5) == "1,234.5"
        assert format_amount(1234.56) == "1,234.56"
