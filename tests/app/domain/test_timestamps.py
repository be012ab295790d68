"""Testes do codec de timestamps Daraja."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from app.domain.timestamps import (
    EAT,
    format_vendor_timestamp,
    parse_vendor_timestamp,
    vendor_timestamp,
)

FIXED_NOW = datetime(2023, 10, 5, 11, 30, tzinfo=UTC)


class TestVendorTimestamp:
    def test_formats_in_eat_regardless_of_input_zone(self) -> None:
        assert vendor_timestamp(FIXED_NOW) == "20231005143000"
        sao_paulo = FIXED_NOW.astimezone(timezone(timedelta(hours=-3)))
        assert vendor_timestamp(sao_paulo) == "20231005143000"

    def test_naive_datetime_is_treated_as_utc(self) -> None:
        assert vendor_timestamp(datetime(2023, 10, 5, 11, 30)) == "20231005143000"

    def test_crosses_midnight_into_next_day(self) -> None:
        assert vendor_timestamp(datetime(2023, 12, 31, 22, 15, 7, tzinfo=UTC)) == "20240101011507"

    def test_default_clock_yields_fourteen_digits(self) -> None:
        value = vendor_timestamp()
        assert len(value) == 14
        assert value.isdigit()


class TestParseVendorTimestamp:
    @pytest.mark.parametrize("value", ["20231005143000", 20231005143000])
    def test_accepts_string_and_integer(self, value: object) -> None:
        assert parse_vendor_timestamp(value) == datetime(2023, 10, 5, 14, 30, tzinfo=EAT)

    @pytest.mark.parametrize(
        "value",
        [None, "", "2023100514300", "202310051430000", "2023-10-05 14:30", "20231345143000", True],
    )
    def test_rejects_malformed(self, value: object) -> None:
        assert parse_vendor_timestamp(value) is None


class TestFormatVendorTimestamp:
    def test_valid_value_keeps_eat_offset(self) -> None:
        assert format_vendor_timestamp("20191122063845", FIXED_NOW) == "2019-11-22T06:38:45+03:00"

    @pytest.mark.parametrize("value", [None, "garbage", "20230230120000"])
    def test_invalid_value_falls_back_to_clock(self, value: object) -> None:
        assert format_vendor_timestamp(value, FIXED_NOW) == "2023-10-05T11:30:00+00:00"
