"""Fixtures for event system tests."""

import pytest

from localization.events import clear_handlers


@pytest.fixture(autouse=True)
def isolated_handlers(event_handlers):
    """Run each test with an empty handler registry."""
    clear_handlers()
    yield event_handlers
