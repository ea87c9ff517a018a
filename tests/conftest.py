"""Pytest configuration and fixtures for test suite.

This is the root-level conftest.py that provides:
- Basic environment variable defaults
- A settings cache reset so tests that patch EXTRACT_* variables see them
"""
import os

import pytest

from elektro_extraction.config import get_settings


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up basic test environment variables before any tests run."""
    os.environ.setdefault("EXTRACT_LOG_LEVEL", "INFO")
    os.environ.setdefault("EXTRACT_ENVIRONMENT", "development")
    get_settings.cache_clear()

    yield


@pytest.fixture
def fresh_settings():
    """Clear the cached settings before and after a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
