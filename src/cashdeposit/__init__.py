"""
Cash Deposit Extractor

Extracts cash deposit transactions from bank alert emails, enriches them
from a client lookup table, and writes fixed-schema booking CSV files.

Domain Packages:
- core: Amount normalization, value dates, configuration
- alerts: Body segmentation, field extraction, email reading
- lookup: Client lookup table loading and session cache
- export: Booking CSV rows and files
- cli: Command-line interface

Example Usage:
    from cashdeposit.alerts import segment, extract
    blocks = segment(body)
    records = [extract(block) for block in blocks]
"""

__version__ = "0.1.0"

from .alerts import (
    ExtractionMode,
    TransactionRecord,
    extract,
    segment,
)
from .core.config import Environment, get_config
from .core.currency import normalize_amount

__all__ = [
    "Environment",
    "ExtractionMode",
    "TransactionRecord",
    "extract",
    "get_config",
    "normalize_amount",
    "segment",
]
