"""
Core Utilities Package

Shared utilities used across the extraction, lookup and export packages.

This package provides:
- Amount normalization with Decimal arithmetic for precision
- Value date handling for the export files
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    reload_config,
)
from .currency import (
    format_amount,
    is_valid_currency_code,
    normalize_amount,
    normalize_currency_code,
)
from .dates import ValueDate

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "ValueDate",
    # Amount utilities
    "format_amount",
    "get_config",
    "is_valid_currency_code",
    "normalize_amount",
    "normalize_currency_code",
    "reload_config",
]
