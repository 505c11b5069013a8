#!/usr/bin/env python3
"""
Alert Field Extractor

Parses a single alert block into a TransactionRecord (amount, currency and
client account code).

Alert text is noisy: reference numbers look like amounts and routing IDs
look like account codes. Two amount strategies are supported:

- lenient: the first "<numeral> <CCY>" in the block. Works when blocks are
  already split one per transaction and the amount line leads the block.
- strict: an explicit "Amount:" / "Amount -" label wins; otherwise the
  numeral nearest an "amount" word wins; otherwise the first numeral.

Account codes are picked by context: codes annotated with "AC", "/BNF" or
"/FFC" beat unannotated 6-digit-plus-letter tokens.
"""

import logging
import re

from ..core.currency import normalize_amount, normalize_currency_code
from .models import ExtractionMode, TransactionRecord
from .selection import score_candidates, select_best
from .text import normalize_whitespace

logger = logging.getLogger(__name__)

# Numerals start on a digit-run boundary and never hold ",,"
_NUMERAL = r"(?<!\d)(?<!\d,)\d(?:,?\d)*(?:\.\d{1,4})?"

AMOUNT_CURRENCY_PATTERN = re.compile(rf"({_NUMERAL})\s*([A-Za-z]{{3}})\b", re.ASCII)
LABELED_AMOUNT_PATTERN = re.compile(
    rf"\bamount\s*[:\-]\s*({_NUMERAL})\s*([A-Za-z]{{3}})\b", re.IGNORECASE | re.ASCII
)
AMOUNT_WORD_PATTERN = re.compile(r"\bamount\b", re.IGNORECASE | re.ASCII)

ACCOUNT_CODE_PATTERN = re.compile(r"\b(\d{6}[A-Z])\b", re.ASCII)
ACCOUNT_CONTEXT_PATTERNS = (
    re.compile(r"\bAC\b", re.IGNORECASE | re.ASCII),
    re.compile(r"/BNF\b", re.IGNORECASE | re.ASCII),
    re.compile(r"/FFC\b", re.IGNORECASE | re.ASCII),
)

# Context windows (characters before, characters after the match)
AMOUNT_WINDOW = (120, 60)
ACCOUNT_CODE_WINDOW = (40, 20)


def _has_amount_word(window: str) -> bool:
    return AMOUNT_WORD_PATTERN.search(window) is not None


def _has_account_context(window: str) -> bool:
    return any(pattern.search(window) for pattern in ACCOUNT_CONTEXT_PATTERNS)


def find_amount_lenient(text: str) -> tuple[str, str] | None:
    """
    First numeral+currency pair anywhere in the text.

    Returns:
        (raw numeral, raw currency token), or None if nothing matches
    """
    match = AMOUNT_CURRENCY_PATTERN.search(text)
    if not match:
        return None
    return match.group(1), match.group(2)


def find_amount_strict(text: str) -> tuple[str, str] | None:
    """
    Numeral+currency pair anchored on an "amount" label.

    Falls back to scoring every numeral+currency pair by whether the word
    "amount" appears within 120 characters before or 60 after it; with no
    such pair the first one found is returned.
    """
    labeled = LABELED_AMOUNT_PATTERN.search(text)
    if labeled:
        return labeled.group(1), labeled.group(2)

    matches = [
        ((match.group(1), match.group(2)), match.start(), match.end())
        for match in AMOUNT_CURRENCY_PATTERN.finditer(text)
    ]
    before, after = AMOUNT_WINDOW
    best = select_best(score_candidates(matches, text, _has_amount_word, before, after))
    return best.value if best else None


def find_account_code(text: str) -> str | None:
    """
    Pick the most likely client account code in the text.

    Every standalone 6-digit-plus-uppercase-letter token is a candidate.
    Candidates with "AC", "/BNF" or "/FFC" within 40 characters before or
    20 after are preferred; ties go to the earliest.
    """
    matches = [(match.group(1), match.start(), match.end()) for match in ACCOUNT_CODE_PATTERN.finditer(text)]
    before, after = ACCOUNT_CODE_WINDOW
    best = select_best(score_candidates(matches, text, _has_account_context, before, after))
    return best.value if best else None


def extract(
    block: str,
    mode: ExtractionMode = ExtractionMode.LENIENT,
    require_account_code: bool = False,
) -> TransactionRecord:
    """
    Parse one alert block into a TransactionRecord.

    Missing or malformed fields are left as None rather than raising; the
    record's ``valid`` flag tells the caller whether the block was usable.

    Args:
        block: Block text from the segmenter (or a whole body)
        mode: Amount extraction strategy
        require_account_code: Also require an account code for validity

    Returns:
        TransactionRecord

    Raises:
        TypeError: If block is not a string
    """
    if not isinstance(block, str):
        raise TypeError(f"block must be a string, got {type(block).__name__}")

    text = normalize_whitespace(block)

    amount_raw = None
    amount = None
    currency = None

    found = find_amount_strict(text) if mode == ExtractionMode.STRICT else find_amount_lenient(text)
    if found:
        amount_raw, currency_raw = found
        currency = normalize_currency_code(currency_raw)
        amount = normalize_amount(amount_raw)
        if amount is None:
            logger.debug(f"Numeral '{amount_raw}' matched but could not be converted")

    account_code = find_account_code(text)

    valid = amount is not None and currency is not None
    if require_account_code:
        valid = valid and account_code is not None

    return TransactionRecord(
        amount=amount,
        currency=currency,
        amount_raw=amount_raw,
        account_code=account_code,
        valid=valid,
    )
