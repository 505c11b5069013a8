"""
CSV Export Package

Fixed-schema booking files for extracted cash deposits, one file per deposit.
"""

from .csv_writer import (
    CSV_HEADERS,
    build_csv_row,
    export_entries,
    export_filename,
    nostro_for,
    to_csv,
)

__all__ = [
    "CSV_HEADERS",
    "build_csv_row",
    "export_entries",
    "export_filename",
    "nostro_for",
    "to_csv",
]
