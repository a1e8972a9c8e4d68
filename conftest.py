"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

_SETTINGS_ENV = (
    "EKW_VERIFY_CHECKSUM",
    "EKW_REQUIRE_VALIDATION",
    "EKW_STRICT_CHECKSUM",
    "EKW_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch):
    """Keep a developer's shell or .env settings out of the test run."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    yield
