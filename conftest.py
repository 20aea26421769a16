"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch):
    """Tests run against the built-in defaults, not whatever the shell or .env set."""
    for name in (
        "BAHTTEXT_VAT_RATE",
        "BAHTTEXT_DEFAULT_WITHHOLDING_PERCENT",
        "BAHTTEXT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
