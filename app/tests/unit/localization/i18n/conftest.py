"""Feature-level fixtures for i18n tests.

Provides in-memory catalog sources, configurations and a temporary
translations directory for the filesystem loader.
"""

import asyncio
import json
from typing import Dict, List, Optional

import pytest
import yaml

from localization.i18n import CatalogSource, I18nConfig, I18nManager


class StaticLoader(CatalogSource):
    """Synchronous loader returning fixed translations."""

    def __init__(
        self,
        translations: Dict[str, Dict[str, str]],
        calls: Optional[List[str]] = None,
        name: str = "static",
    ):
        self.translations = translations
        self.calls = calls if calls is not None else []
        self.name = name

    def load(self):
        self.calls.append(self.name)
        return self.translations


class AsyncStaticLoader(CatalogSource):
    """Coroutine loader returning fixed translations after a delay."""

    def __init__(
        self,
        translations: Dict[str, Dict[str, str]],
        delay: float = 0,
        calls: Optional[List[str]] = None,
        name: str = "async",
    ):
        self.translations = translations
        self.delay = delay
        self.calls = calls if calls is not None else []
        self.name = name

    async def load(self):
        self.calls.append(self.name)
        await asyncio.sleep(self.delay)
        return self.translations


class FailingLoader(CatalogSource):
    """Loader that always raises."""

    def __init__(self, error: Exception):
        self.error = error

    async def load(self):
        await asyncio.sleep(0)
        raise self.error


@pytest.fixture
def load_calls():
    """Names of loaders in the order their load() started."""
    return []


@pytest.fixture
def static_loader(load_calls):
    """Build a loader factory for fixed translations.

    Usage:
        manager.register_loader("a", static_loader({"en": {"k": "v"}}, name="a"))
    """

    def _factory(translations, name="static", delay=None):
        def build(config):
            if delay is None:
                return StaticLoader(translations, load_calls, name)
            return AsyncStaticLoader(translations, delay, load_calls, name)

        return build

    return _factory


@pytest.fixture
def failing_loader():
    """Build a loader factory that raises ``error`` on load."""

    def _factory(error=None):
        return lambda config: FailingLoader(error or RuntimeError("source unavailable"))

    return _factory


@pytest.fixture
def two_source_config():
    """Config with sources "a" and "b" enabled, in that order."""
    return I18nConfig(
        default_locale="en",
        loaders={"a": {"enabled": True}, "b": {"enabled": True}},
    )


@pytest.fixture
def manager_factory(static_loader):
    """Create a manager with sources "a" and "b" registered."""

    def _factory(config, a=None, b=None, emitter=None, delay_a=None, delay_b=None):
        manager = I18nManager(config, emitter=emitter)
        manager.register_loader(
            "a",
            static_loader(
                a if a is not None else {"en": {"welcome": "Hi"}, "fr": {"welcome": "Salut"}},
                name="a",
                delay=delay_a,
            ),
        )
        manager.register_loader(
            "b",
            static_loader(
                b if b is not None else {"en": {"bye": "Bye"}},
                name="b",
                delay=delay_b,
            ),
        )
        return manager

    return _factory


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a translations directory.

    Layout:
    - en/messages.yaml
    - en/emails/welcome.json
    - fr/messages.yml
    - es.yaml
    """
    (tmp_path / "en" / "emails").mkdir(parents=True)
    (tmp_path / "fr").mkdir()

    with open(tmp_path / "en" / "messages.yaml", "w", encoding="utf-8") as f:
        yaml.dump(
            {
                "greeting": "Hello {name}",
                "nav": {"home": "Home", "settings": "Settings"},
                "only_en": "English only",
            },
            f,
        )

    with open(tmp_path / "en" / "emails" / "welcome.json", "w", encoding="utf-8") as f:
        json.dump({"subject": "Welcome {{name}}", "count": 3}, f)

    with open(tmp_path / "fr" / "messages.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"greeting": "Bonjour {name}", "nav": {"home": "Accueil"}},
            f,
            allow_unicode=True,
        )

    with open(tmp_path / "es.yaml", "w", encoding="utf-8") as f:
        yaml.dump({"greeting": "Hola {name}"}, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def fs_config(temp_translations_dir):
    """Config enabling only the built-in filesystem loader."""
    return I18nConfig(
        default_locale="en",
        fallback_locales={"fr-CA": "fr"},
        loaders={"fs": {"enabled": True, "location": str(temp_translations_dir)}},
    )
