#!/usr/bin/env python3
"""
Cash Deposit CSV Writer

Builds the fixed 17-column booking row for each deposit and writes one CSV
file per deposit (header + row, CRLF line endings).

Constant columns describe an incoming client cash deposit; the lookup row
supplies the legal entity and client accounts, and the currency picks the
nostro account.
"""

import csv
import io
import logging
from collections.abc import Sequence
from pathlib import Path

from ..alerts.models import DepositEntry
from ..core.currency import format_amount

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "TRADE_SUBTYPE",
    "LEGAL_ENTITY_CODE",
    "INTERMEDIARY_BANK",
    "VALUE_DATE",
    "CLIENT_CODE",
    "CLIENT_MASTER_ACCOUNT_NAME",
    "CLIENT_SUB_ACCOUNT",
    "SIDE",
    "AMOUNT",
    "CURRENCY",
    "NOSTRO_BANK",
    "NOSTRO_CODE",
    "COMMENT",
    "FILE_TYPE",
    "COUNTERPARTY_BIC",
    "COUNTERPARTY_ACCOUNT_NUMBER",
    "CUSTODY",
]

TRADE_SUBTYPE = "Client Cash"
SIDE = "CREDIT"
COMMENT = "Cash Deposit"
FILE_TYPE = "CASH"
COUNTERPARTY_BIC = "XXXXXXXXXXX"
CUSTODY = "TRUE"

# USD settles through a different nostro than every other currency
USD_NOSTRO_BANK = "BAML1"
OTHER_NOSTRO_BANK = "BAML"
USD_NOSTRO_PREFIX = "CS-SEG-BOANY-IFE11025-"
OTHER_NOSTRO_PREFIX = "CS-SEG-BOAN-IFE11025-"


def nostro_for(currency: str | None) -> tuple[str, str]:
    """
    Nostro bank and nostro code for a currency.

    Returns:
        (nostro bank, nostro code), e.g. ("BAML1", "CS-SEG-BOANY-IFE11025-USD")
    """
    ccy = currency or ""
    if ccy == "USD":
        return USD_NOSTRO_BANK, f"{USD_NOSTRO_PREFIX}{ccy}"
    return OTHER_NOSTRO_BANK, f"{OTHER_NOSTRO_PREFIX}{ccy}"


def build_csv_row(entry: DepositEntry) -> list[str]:
    """Map a deposit entry to the 17 export columns, in CSV_HEADERS order."""
    record = entry.record
    lookup = entry.lookup
    nostro_bank, nostro_code = nostro_for(record.currency)

    return [
        TRADE_SUBTYPE,
        lookup.legal_entity if lookup else "",
        "",  # INTERMEDIARY_BANK
        entry.value_date.to_csv_string(),
        lookup.client_code if lookup else "",
        lookup.client_master_account if lookup else "",
        lookup.client_sub_account if lookup else "",
        SIDE,
        format_amount(record.amount),
        record.currency or "",
        nostro_bank,
        nostro_code,
        COMMENT,
        FILE_TYPE,
        COUNTERPARTY_BIC,
        "",  # COUNTERPARTY_ACCOUNT_NUMBER
        CUSTODY,
    ]


def to_csv(rows: Sequence[Sequence[str]]) -> str:
    """
    Serialize rows as CSV text.

    Fields containing a comma, double quote, CR or LF are quoted with inner
    quotes doubled. Every line, including the last, ends in CRLF.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
    writer.writerows([["" if value is None else str(value) for value in row] for row in rows])
    return buffer.getvalue()


def export_filename(entry: DepositEntry, index: int, total: int) -> str:
    """
    File name for the index-th (1-based) of `total` exported deposits.

    Example: cash_deposit_472852G_USD_15-08-2024_02.csv
    The _NN suffix is only added when more than one file is exported.
    """
    code = entry.record.account_code or f"UNKNOWN_{index}"
    ccy = entry.record.currency or "CCY"
    suffix = f"_{index:02d}" if total > 1 else ""
    return f"cash_deposit_{code}_{ccy}_{entry.value_date.to_filename_string()}{suffix}.csv"


def export_entries(entries: Sequence[DepositEntry], output_dir: str | Path) -> list[Path]:
    """
    Write one CSV file per deposit entry.

    Args:
        entries: Deposits to export, in order
        output_dir: Directory to write into (created if missing)

    Returns:
        Paths of the files written, in order
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for index, entry in enumerate(entries, start=1):
        csv_text = to_csv([CSV_HEADERS, build_csv_row(entry)])
        path = output_dir / export_filename(entry, index, len(entries))
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(csv_text)
        written.append(path)
        logger.debug(f"Wrote {path}")

    logger.info(f"Exported {len(written)} CSV file(s) to {output_dir}")
    return written
