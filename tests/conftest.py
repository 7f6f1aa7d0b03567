"""Pytest configuration and shared fixtures."""
import pytest
from datetime import datetime
from config import config


@pytest.fixture(autouse=True)
def utc_naive_timezone(monkeypatch):
    """Read zone-less inputs as UTC regardless of the environment."""
    monkeypatch.setattr(config, "naive_timezone", "UTC")


@pytest.fixture
def span_start():
    """Start instant shared by the time-span examples."""
    return datetime(2000, 1, 1, 10, 0, 0)
