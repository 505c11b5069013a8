#!/usr/bin/env python3
"""
Alert Block Segmenter

Splits a deposit alert body into one block per transaction.

Alerts list each deposit as a run of table rows starting with an
"Amount: " label. Anchoring on that label rather than on the table markup
keeps the split stable across whatever HTML the sending system wraps around
the rows.
"""

import logging
import re

from .text import normalize_body

logger = logging.getLogger(__name__)

TABLE_START_PATTERN = re.compile(r"<table", re.IGNORECASE)
TABLE_END_PATTERN = re.compile(r"</table", re.IGNORECASE)
FIELD_MARKER_PATTERN = re.compile(r"Amount: ", re.IGNORECASE)

# A block is only real if it carries "<numeral> <CCY>" somewhere in its text.
# Numerals start on a digit-run boundary and never hold ",,"
BLOCK_AMOUNT_PATTERN = re.compile(r"(?<!\d)(?<!\d,)\d(?:,?\d)*(?:\.\d{1,4})?\s*[A-Za-z]{3}\b", re.ASCII)


def _tabular_region(text: str) -> tuple[int, int]:
    """
    Locate the span between the first opening and last closing table marker.

    A missing opening marker starts the region at 0; a missing closing marker
    ends it at the end of the text.
    """
    start_match = TABLE_START_PATTERN.search(text)
    start = start_match.start() if start_match else 0

    end = len(text)
    for end_match in TABLE_END_PATTERN.finditer(text, start):
        end = end_match.start()

    return start, end


def find_marker_offsets(region: str) -> list[int]:
    """Offsets of every field marker in the region, left to right."""
    return [match.start() for match in FIELD_MARKER_PATTERN.finditer(region)]


def is_transaction_block(candidate: str) -> bool:
    """Check that a candidate block contains a numeral followed by a currency code."""
    return BLOCK_AMOUNT_PATTERN.search(candidate) is not None


def segment(body: str) -> list[str]:
    """
    Split an email body into ordered transaction blocks.

    Args:
        body: Full email body, HTML or plain text

    Returns:
        Non-empty list of block strings. When no usable block is found the
        list holds the original body unchanged so the extractor can still
        make a best-effort pass over it.

    Raises:
        TypeError: If body is not a string
    """
    if not isinstance(body, str):
        raise TypeError(f"body must be a string, got {type(body).__name__}")

    text = normalize_body(body)
    start, end = _tabular_region(text)
    region = text[start:end]

    offsets = find_marker_offsets(region)
    if not offsets:
        logger.debug("No field markers found; using whole body as a single block")
        return [body]

    blocks = []
    for i, offset in enumerate(offsets):
        block_end = offsets[i + 1] if i + 1 < len(offsets) else len(region)
        candidate = region[offset:block_end]

        if is_transaction_block(candidate):
            blocks.append(candidate)
        else:
            logger.debug(f"Skipping marker at offset {start + offset}: no amount and currency in block")

    if not blocks:
        logger.info(f"None of {len(offsets)} marker(s) led to a valid block; using whole body")
        return [body]

    logger.info(f"Segmented body into {len(blocks)} block(s) from {len(offsets)} marker(s)")
    return blocks
