#!/usr/bin/env python3
"""
Deposit Alert Domain Models

Immutable records produced by the extractor and the structures that carry
them through the lookup join to export.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from ..core.currency import format_amount
from ..core.dates import ValueDate
from ..lookup.loader import LookupRow


class ExtractionMode(Enum):
    """Amount extraction strategies."""

    LENIENT = "lenient"  # first numeral+currency anywhere in the block
    STRICT = "strict"  # prefer a numeral anchored on an "amount" label


@dataclass(frozen=True)
class ExtractionSettings:
    """Strategy and validity rules applied to every block of an email."""

    mode: ExtractionMode = ExtractionMode.LENIENT
    require_account_code: bool = False

    @classmethod
    def from_config(cls, mode: str, require_account_code: bool) -> "ExtractionSettings":
        """Build settings from the string values held in Config."""
        return cls(mode=ExtractionMode(mode), require_account_code=require_account_code)


@dataclass(frozen=True)
class TransactionRecord:
    """
    One transaction parsed out of an alert block.

    Absent fields are None. ``valid`` is decided by the extractor when the
    record is built and never recomputed.
    """

    amount: Decimal | None = None
    currency: str | None = None
    amount_raw: str | None = None
    account_code: str | None = None
    valid: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (amount as a 2dp string)."""
        return {
            "amount": format_amount(self.amount) if self.amount is not None else None,
            "currency": self.currency,
            "amount_raw": self.amount_raw,
            "account_code": self.account_code,
            "valid": self.valid,
        }


@dataclass(frozen=True)
class DepositEntry:
    """A valid record stamped with its value date and joined to its lookup row."""

    record: TransactionRecord
    value_date: ValueDate
    lookup: LookupRow | None = None

    @property
    def lookup_found(self) -> bool:
        return self.lookup is not None


@dataclass
class ExtractionResult:
    """Outcome of processing one email body."""

    entries: list[DepositEntry] = field(default_factory=list)
    block_count: int = 0
    discarded_count: int = 0

    @property
    def has_transactions(self) -> bool:
        return bool(self.entries)

    @property
    def missing_lookup_count(self) -> int:
        return sum(1 for entry in self.entries if not entry.lookup_found)

    def summary(self) -> list[dict[str, Any]]:
        """Per-entry summary for display, numbered from 1."""
        return [
            {
                "i": i,
                "amount": format_amount(entry.record.amount),
                "currency": entry.record.currency,
                "account_code": entry.record.account_code,
                "lookup_found": entry.lookup_found,
            }
            for i, entry in enumerate(self.entries, start=1)
        ]
