"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from cashdeposit.core.dates import ValueDate
from tests.fixtures.alert_samples import LOOKUP_CSV


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def lookup_csv(temp_dir) -> Path:
    """Lookup CSV with rows for 472852G and 310045K."""
    path = temp_dir / "lookup" / "Cash_Deposit_Lookup.csv"
    path.parent.mkdir(parents=True)
    path.write_text(LOOKUP_CSV, encoding="utf-8")
    return path


@pytest.fixture
def value_date() -> ValueDate:
    """Value date used across export tests."""
    return ValueDate.from_string("2024-08-15")


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and reset the cached configuration."""
    monkeypatch.setenv("CASHDEPOSIT_ENV", "test")
    monkeypatch.setenv("CASHDEPOSIT_DATA_DIR", str(tmp_path / "cashdeposit_data"))
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    for name in ("CASHDEPOSIT_LOOKUP_CSV", "CASHDEPOSIT_AMOUNT_MODE", "CASHDEPOSIT_REQUIRE_ACCOUNT_CODE"):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setattr("cashdeposit.core.config._config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for amount handling and precision")
    config.addinivalue_line("markers", "alerts: Tests for alert segmentation and extraction")
    config.addinivalue_line("markers", "lookup: Tests for lookup table loading")
    config.addinivalue_line("markers", "export: Tests for CSV export")
