#!/usr/bin/env python3
"""
Alert Processor

Runs one email body through the whole extraction chain:
segment -> extract per block -> keep valid records -> lookup join.
"""

import logging

from ..core.dates import ValueDate
from ..lookup.cache import LookupCache
from .email_reader import AlertEmail
from .extractor import extract
from .models import DepositEntry, ExtractionResult, ExtractionSettings
from .segmenter import segment

logger = logging.getLogger(__name__)

NO_TRANSACTIONS_MESSAGE = "No valid transaction blocks found. Ensure each has Amount, Currency, and Account code."


def process_body(
    body: str,
    value_date: ValueDate,
    lookup_cache: LookupCache | None = None,
    settings: ExtractionSettings | None = None,
) -> ExtractionResult:
    """
    Extract every valid deposit from an email body.

    Args:
        body: Email body (HTML or plain text)
        value_date: Date stamped on every deposit found
        lookup_cache: Session lookup cache; without one no lookups are joined
        settings: Extraction strategy and validity rules (lenient by default)

    Returns:
        ExtractionResult with one entry per valid record, in body order
    """
    settings = settings or ExtractionSettings()

    blocks = segment(body)
    records = []
    discarded = 0
    for index, block in enumerate(blocks, start=1):
        record = extract(block, mode=settings.mode, require_account_code=settings.require_account_code)
        if record.valid:
            records.append(record)
        else:
            discarded += 1
            logger.debug(
                f"Block {index}/{len(blocks)} discarded: amount={record.amount_raw!r} "
                f"currency={record.currency!r} account_code={record.account_code!r}"
            )

    if lookup_cache is not None and records:
        lookups = lookup_cache.find_rows_for(records)
    else:
        lookups = [None] * len(records)

    entries = [
        DepositEntry(record=record, value_date=value_date, lookup=lookup)
        for record, lookup in zip(records, lookups, strict=True)
    ]

    result = ExtractionResult(entries=entries, block_count=len(blocks), discarded_count=discarded)
    logger.info(
        f"Extracted {len(entries)} transaction(s) from {len(blocks)} block(s); "
        f"{result.missing_lookup_count} without lookup"
    )
    return result


def process_email(
    alert: AlertEmail,
    lookup_cache: LookupCache | None = None,
    settings: ExtractionSettings | None = None,
    value_date: ValueDate | None = None,
) -> ExtractionResult:
    """
    Extract deposits from a loaded alert email.

    The value date defaults to the UTC date the email was received.
    """
    if value_date is None:
        value_date = ValueDate.from_datetime(alert.date)
    return process_body(alert.body, value_date, lookup_cache=lookup_cache, settings=settings)
