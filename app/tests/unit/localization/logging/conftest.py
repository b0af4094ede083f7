"""Fixtures for logging tests."""

from unittest.mock import MagicMock

import pytest

from localization.logging.setup import configure_logging


@pytest.fixture
def mock_settings():
    """Settings stand-in with the attributes read by configure_logging."""
    settings = MagicMock()
    settings.LOG_LEVEL = "INFO"
    settings.APP_NAME = "localization-test"
    settings.is_production = False
    return settings


@pytest.fixture
def restore_logging():
    """Reset structlog to the silent test configuration afterwards."""
    yield
    configure_logging()
