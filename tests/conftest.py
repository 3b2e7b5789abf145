"""Pytest configuration and shared fixtures for miscutils tests."""

import sys
from pathlib import Path

import pytest
import structlog


sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from miscutils.params import ParameterSet
from miscutils.settings import get_settings


# ==================== Isolation Fixtures ====================


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and any MISCUTILS_* environment around each test."""
    monkeypatch.delenv("MISCUTILS_CONFIG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test configures it."""
    yield
    structlog.reset_defaults()


# ==================== Data Fixtures ====================


@pytest.fixture
def base_address() -> str:
    """A plain, already-normalized base address."""
    return "http://example.com/path"


@pytest.fixture
def site_params() -> ParameterSet:
    """Repeated names, a None value and a value needing encoding."""
    return ParameterSet.from_pairs(
        [
            ("site", "01646500"),
            ("site", "01638500"),
            ("format", None),
            ("format", "rdb"),
            ("parameterCd", " 00060 "),
            ("startDT", "2024-01-01 00:00"),
        ]
    )
