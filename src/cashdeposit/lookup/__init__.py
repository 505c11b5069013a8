"""
Client Lookup Package

Loads the account code lookup table and caches it for the session.

Key Components:
- loader: CSV loading into LookupTable / LookupRow
- cache: LookupCache, the load-once session cache used by the processor
"""

from .cache import LookupCache
from .loader import LOOKUP_COLUMNS, LookupRow, LookupTable, load_lookup_table

__all__ = [
    "LOOKUP_COLUMNS",
    "LookupCache",
    "LookupRow",
    "LookupTable",
    "load_lookup_table",
]
