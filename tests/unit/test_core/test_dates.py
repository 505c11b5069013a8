#!/usr/bin/env python3
"""Tests for the ValueDate primitive."""

from datetime import date, datetime, timedelta, timezone

import pytest

from cashdeposit.core.dates import ValueDate


class TestValueDate:
    """Test ValueDate construction and formatting."""

    def test_from_string(self):
        """Test ISO parsing."""
        assert ValueDate.from_string("2024-08-15").date == date(2024, 8, 15)

    def test_from_string_rejects_bad_input(self):
        """Test malformed strings raise ValueError."""
        with pytest.raises(ValueError):
            ValueDate.from_string("15/08/2024")

    def test_from_datetime_uses_utc_calendar_date(self):
        """Test a late-evening local timestamp rolls over to the next UTC day."""
        eastern = timezone(timedelta(hours=-5))
        received = datetime(2024, 8, 15, 23, 30, tzinfo=eastern)
        assert ValueDate.from_datetime(received).date == date(2024, 8, 16)

    def test_from_datetime_naive_is_taken_as_utc(self):
        """Test naive datetimes keep their calendar date."""
        assert ValueDate.from_datetime(datetime(2024, 1, 2, 3, 4)).date == date(2024, 1, 2)

    def test_csv_and_filename_formats(self):
        """Test DD/MM/YYYY for the CSV column and DD-MM-YYYY for file names."""
        value_date = ValueDate.from_string("2024-08-05")
        assert value_date.to_csv_string() == "05/08/2024"
        assert value_date.to_filename_string() == "05-08-2024"
        assert str(value_date) == "05/08/2024"

    def test_immutable(self):
        """Test ValueDate is frozen."""
        value_date = ValueDate.from_string("2024-08-05")
        with pytest.raises(AttributeError):
            value_date.date = date(2024, 1, 1)  # type: ignore
