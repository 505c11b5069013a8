#!/usr/bin/env python3
"""
Session Lookup Cache

The lookup table is loaded once per session and reused for every email.
The cache is an ordinary object owned by the caller, so tests and separate
sessions never share state.
"""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .loader import LookupRow, LookupTable, load_lookup_table

if TYPE_CHECKING:
    from ..alerts.models import TransactionRecord

logger = logging.getLogger(__name__)


class LookupCache:
    """
    Lazily loaded, load-once holder for the lookup table.

    A failed load is not remembered: the next call tries again.
    """

    def __init__(self, csv_path: str | Path, loader: Callable[[Path], LookupTable] = load_lookup_table):
        self.csv_path = Path(csv_path)
        self._loader = loader
        self._table: LookupTable | None = None

    @property
    def is_loaded(self) -> bool:
        return self._table is not None

    def get(self) -> LookupTable:
        """
        Return the cached table, loading it on first use.

        Raises:
            FileNotFoundError: If the CSV does not exist
            ValueError: If the CSV cannot be parsed
        """
        if not self.is_loaded:
            self._table = self._loader(self.csv_path)
        return self._table

    def find_rows_for(self, records: Sequence["TransactionRecord"]) -> list[LookupRow | None]:
        """
        Look up each record's account code.

        Never raises: if the table cannot be loaded every result is None and
        the export carries blank lookup fields.

        Returns:
            One LookupRow or None per record, in the same order
        """
        try:
            table = self.get()
        except (OSError, ValueError) as e:
            logger.warning(f"Lookup table unavailable ({self.csv_path}): {e}")
            return [None] * len(records)

        return [table.find(record.account_code) for record in records]
