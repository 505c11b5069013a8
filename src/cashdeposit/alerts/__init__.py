"""
Deposit Alert Processing Package

Turns cash deposit alert emails into structured transaction records.

Alert emails list one or more deposits, each introduced by an "Amount: "
row inside an HTML table, along with routing details that carry the client
account code (e.g. "/BNF/ AC 472852G").

Key Components:
- text: body and whitespace normalization
- segmenter: splitting a body into one block per deposit
- extractor: parsing a block into a TransactionRecord
- selection: scored candidate selection shared by the extractor
- email_reader: loading saved .eml / body files
- processor: the segment -> extract -> lookup chain

Amount Strategies:
- lenient (default): first "<numeral> <CCY>" in the block
- strict: label-anchored "Amount: <numeral> <CCY>", then nearest "amount"
"""

from .email_reader import AlertEmail, load_alert_email, parse_alert_message
from .extractor import extract, find_account_code, find_amount_lenient, find_amount_strict
from .models import (
    DepositEntry,
    ExtractionMode,
    ExtractionResult,
    ExtractionSettings,
    TransactionRecord,
)
from .processor import NO_TRANSACTIONS_MESSAGE, process_body, process_email
from .segmenter import segment
from .selection import Candidate, select_best
from .text import normalize_body, normalize_whitespace

__all__ = [
    "NO_TRANSACTIONS_MESSAGE",
    "AlertEmail",
    "Candidate",
    "DepositEntry",
    "ExtractionMode",
    "ExtractionResult",
    "ExtractionSettings",
    "TransactionRecord",
    "extract",
    "find_account_code",
    "find_amount_lenient",
    "find_amount_strict",
    "load_alert_email",
    "normalize_body",
    "normalize_whitespace",
    "parse_alert_message",
    "process_body",
    "process_email",
    "segment",
    "select_best",
]
