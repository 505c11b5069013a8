#!/usr/bin/env python3
"""
Client Lookup Table Loader

Loads the cash deposit lookup CSV that maps client account codes to the
legal entity and client account identifiers written into each export.

Expected columns:
- AccountCode
- LegalEntity
- ClientCode
- ClientMasterAccount
- ClientSubAccount
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)

LOOKUP_COLUMNS = {
    "AccountCode": "account_code",
    "LegalEntity": "legal_entity",
    "ClientCode": "client_code",
    "ClientMasterAccount": "client_master_account",
    "ClientSubAccount": "client_sub_account",
}


@dataclass(frozen=True)
class LookupRow:
    """One client row from the lookup table."""

    account_code: str = ""
    legal_entity: str = ""
    client_code: str = ""
    client_master_account: str = ""
    client_sub_account: str = ""


def _match_key(account_code: str | None) -> str:
    return str(account_code or "").strip().upper()


@dataclass
class LookupTable:
    """In-memory lookup table with case-insensitive account code matching."""

    rows: list[LookupRow] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def find(self, account_code: str | None) -> LookupRow | None:
        """
        Find the first row whose AccountCode matches.

        Both sides are trimmed and upper-cased before comparing. A missing or
        blank code never matches, even against rows with a blank AccountCode.
        """
        needle = _match_key(account_code)
        if not needle:
            return None
        for row in self.rows:
            if _match_key(row.account_code) == needle:
                return row
        return None


def load_lookup_table(csv_path: str | Path) -> LookupTable:
    """
    Load the lookup CSV into a LookupTable.

    All cells are read as strings with no NA conversion, so codes like
    "000123A" keep their leading zeros and empty cells stay empty. Header
    names and cell values are trimmed; columns missing from the file yield
    blank fields.

    Args:
        csv_path: Path to the lookup CSV

    Returns:
        LookupTable

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed as CSV
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Lookup CSV not found: {csv_path}")

    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    df.columns = [str(col).strip() for col in df.columns]

    missing = [col for col in LOOKUP_COLUMNS if col not in df.columns]
    if missing:
        logger.warning(f"Lookup CSV {csv_path.name} is missing column(s): {', '.join(missing)}")

    rows = []
    for _, record in df.iterrows():
        values = {attr: str(record.get(col, "")).strip() for col, attr in LOOKUP_COLUMNS.items()}
        rows.append(LookupRow(**values))

    logger.info(f"Loaded {len(rows)} lookup rows from {csv_path}")
    return LookupTable(rows=rows)
