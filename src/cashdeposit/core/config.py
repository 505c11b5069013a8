#!/usr/bin/env python3
"""
Configuration Management for the Cash Deposit Extractor

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

AMOUNT_MODES = ("lenient", "strict")
DEFAULT_LOOKUP_FILENAME = "Cash_Deposit_Lookup.csv"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class LookupConfig:
    """Lookup table location."""

    csv_path: Path


@dataclass
class ExtractionConfig:
    """Amount extraction strategy and validity rules."""

    mode: str = "lenient"
    require_account_code: bool = False


@dataclass
class Config:
    """
    Main configuration class for the extractor.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    # Component configurations
    lookup: LookupConfig
    extraction: ExtractionConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("CASHDEPOSIT_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_cashdeposit"
            base_dir = Path(os.getenv("CASHDEPOSIT_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("CASHDEPOSIT_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        output_dir = data_dir / "exports"

        for directory in [data_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        lookup_csv = os.getenv("CASHDEPOSIT_LOOKUP_CSV")
        lookup = LookupConfig(
            csv_path=(
                Path(lookup_csv).expanduser() if lookup_csv else data_dir / "lookup" / DEFAULT_LOOKUP_FILENAME
            ),
        )

        extraction = ExtractionConfig(
            mode=os.getenv("CASHDEPOSIT_AMOUNT_MODE", "lenient").strip().lower(),
            require_account_code=os.getenv("CASHDEPOSIT_REQUIRE_ACCOUNT_CODE", "false").lower() == "true",
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            lookup=lookup,
            extraction=extraction,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [
            ("data_dir", self.data_dir),
            ("output_dir", self.output_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if self.extraction.mode not in AMOUNT_MODES:
            errors.append(
                f"CASHDEPOSIT_AMOUNT_MODE must be one of {', '.join(AMOUNT_MODES)}, got '{self.extraction.mode}'"
            )

        # The lookup table is optional everywhere except production
        if self.environment == Environment.PRODUCTION and not self.lookup.csv_path.exists():
            errors.append(f"Lookup CSV is required in production: {self.lookup.csv_path}")

        if not isinstance(getattr(logging, self.log_level, None), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # pandas can be chatty about parser fallbacks
        if self.environment == Environment.PRODUCTION:
            logging.getLogger("pandas").setLevel(logging.WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            elif hasattr(field_value, "__dict__"):
                # Nested dataclass
                result[field_name] = {
                    nested_name: str(nested_value) if isinstance(nested_value, Path) else nested_value
                    for nested_name, nested_value in field_value.__dict__.items()
                }
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()

