"""Shared pytest fixtures."""

import pytest

from localization.configuration import get_settings
from localization.events import dispatcher


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop the cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def event_handlers():
    """Registry of event handlers, restored after the test."""
    saved = {k: list(v) for k, v in dispatcher.EVENT_HANDLERS.items()}
    yield dispatcher.EVENT_HANDLERS
    dispatcher.clear_handlers()
    dispatcher.EVENT_HANDLERS.update(saved)
