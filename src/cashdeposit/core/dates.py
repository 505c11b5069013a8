#!/usr/bin/env python3
"""
ValueDate Primitive Type

Immutable date wrapper for the value date stamped on each deposit.
The value date is the UTC calendar date on which the alert email was received.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone

CSV_DATE_FORMAT = "%d/%m/%Y"
FILENAME_DATE_FORMAT = "%d-%m-%Y"


@dataclass(frozen=True)
class ValueDate:
    """Immutable value date with the formatting used by the export files."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, format: str = "%Y-%m-%d") -> "ValueDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            ValueDate object
        """
        return cls(date=datetime.strptime(date_str, format).date())

    @classmethod
    def from_datetime(cls, moment: datetime) -> "ValueDate":
        """
        Take the UTC calendar date of a received timestamp.

        Naive datetimes are treated as already being in UTC.
        """
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        return cls(date=moment.date())

    def to_csv_string(self) -> str:
        """Format as DD/MM/YYYY for the VALUE_DATE column."""
        return self.date.strftime(CSV_DATE_FORMAT)

    def to_filename_string(self) -> str:
        """Format as DD-MM-YYYY, safe for use inside file names."""
        return self.date.strftime(FILENAME_DATE_FORMAT)

    def __str__(self) -> str:
        """String representation."""
        return self.to_csv_string()
