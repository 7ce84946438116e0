"""Tests for bdf2csv/timestamps.py"""

import time

import pytest

from bdf2csv.timestamps import (
    INVALID,
    NOT_APPLICABLE,
    format_timestamp,
    parse_epoch,
)


class TestSentinels:
    def test_zero_is_not_applicable(self):
        assert format_timestamp("0") == NOT_APPLICABLE == "N/A"

    def test_empty_is_not_applicable(self):
        assert format_timestamp("") == "N/A"

    def test_garbage_is_invalid(self):
        assert format_timestamp("not-a-number") == INVALID == "Invalid"

    @pytest.mark.parametrize("value", ["1.5", "1e9", "+1700000000", " 1700000000", "0x10", "1_000", "--1"])
    def test_non_integer_forms_are_invalid(self, value):
        assert format_timestamp(value) == "Invalid"

    def test_int64_overflow_is_invalid(self):
        assert format_timestamp(str(2**63)) == "Invalid"
        assert format_timestamp(str(-(2**63) - 1)) == "Invalid"


class TestFormatting:
    def test_known_epoch(self):
        assert format_timestamp("1700000000") == "2023-11-14 22:13:20 UTC"

    def test_epoch_one(self):
        assert format_timestamp("1") == "1970-01-01 00:00:01 UTC"

    def test_negative_zero_is_a_real_time(self):
        assert format_timestamp("-0") == "1970-01-01 00:00:00 UTC"

    def test_negative_epoch(self):
        assert format_timestamp("-1") == "1969-12-31 23:59:59 UTC"

    def test_leap_day(self):
        assert format_timestamp("951782400") == "2000-02-29 00:00:00 UTC"

    def test_small_year_is_zero_padded(self):
        # 0099-01-01 00:00:00 UTC
        assert format_timestamp("-59042995200") == "0099-01-01 00:00:00 UTC"

    def test_beyond_year_9999(self):
        # 10000-01-01 00:00:00 UTC
        assert format_timestamp("253402300800") == "10000-01-01 00:00:00 UTC"

    def test_int64_extremes_never_raise(self):
        assert format_timestamp(str(2**63 - 1)).endswith(" UTC")
        assert format_timestamp(str(-(2**63))).endswith(" UTC")

    def test_ignores_host_timezone(self, monkeypatch):
        expected = format_timestamp("1700000000")
        for tz in ("America/New_York", "Asia/Kolkata", "UTC"):
            monkeypatch.setenv("TZ", tz)
            if hasattr(time, "tzset"):
                time.tzset()
            assert format_timestamp("1700000000") == expected
        monkeypatch.delenv("TZ")
        if hasattr(time, "tzset"):
            time.tzset()


class TestParseEpoch:
    def test_valid(self):
        assert parse_epoch("1700000000") == 1700000000
        assert parse_epoch("-42") == -42

    def test_invalid(self):
        assert parse_epoch("") is None
        assert parse_epoch("abc") is None
        assert parse_epoch("12a") is None
