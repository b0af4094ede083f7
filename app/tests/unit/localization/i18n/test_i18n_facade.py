"""Tests for localization.i18n.i18n module."""

from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from localization.events import MISSING_TRANSLATION_EVENT
from localization.i18n import I18nConfig, I18nManager

pytestmark = pytest.mark.unit


@pytest.fixture
def emitter():
    return MagicMock()


@pytest_asyncio.fixture
async def loaded_manager(static_loader, emitter):
    """Manager with en/fr/fr-CA translations loaded."""
    config = I18nConfig(
        default_locale="en",
        fallback_locales={"fr-CA": "fr"},
        loaders={"mem": {"enabled": True}},
    )
    manager = I18nManager(config, emitter=emitter)
    manager.register_loader(
        "mem",
        static_loader(
            {
                "en": {"greeting": "Hello {name}", "only_en": "English", "empty": ""},
                "fr": {"greeting": "Bonjour {name}", "fr_only": "Seulement"},
                "fr-CA": {"greeting": "Allo {name}"},
            },
            name="mem",
        ),
    )
    await manager.load_translations()
    return manager


def _emitted(emitter):
    return [call.args[0] for call in emitter.call_args_list]


class TestFormatMessage:
    """Tests for I18n.format_message()."""

    @pytest.mark.asyncio
    async def test_message_from_locale(self, loaded_manager, emitter):
        i18n = loaded_manager.locale("fr-CA")

        assert i18n.format_message("greeting", {"name": "Ada"}) == "Allo Ada"
        emitter.assert_not_called()

    @pytest.mark.asyncio
    async def test_message_from_fallback_locale(self, loaded_manager, emitter):
        i18n = loaded_manager.locale("fr-CA")

        assert i18n.t("fr_only") == "Seulement"

        (event,) = _emitted(emitter)
        assert event.event_type == MISSING_TRANSLATION_EVENT
        assert event.metadata == {
            "identifier": "fr_only",
            "locale": "fr-CA",
            "has_fallback": True,
        }

    @pytest.mark.asyncio
    async def test_default_locale_is_fallback(self, loaded_manager):
        assert loaded_manager.locale("de").t("only_en") == "English"

    @pytest.mark.asyncio
    async def test_missing_everywhere(self, loaded_manager, emitter):
        i18n = loaded_manager.locale("fr")

        assert i18n.t("nope") == "translation missing: fr, nope"

        (event,) = _emitted(emitter)
        assert event.metadata["has_fallback"] is False

    @pytest.mark.asyncio
    async def test_explicit_fallback_message(self, loaded_manager):
        assert loaded_manager.locale("fr").t("nope", fallback_message="Default") == "Default"

    @pytest.mark.asyncio
    async def test_configured_fallback_function(self, static_loader):
        config = I18nConfig(
            default_locale="en",
            loaders={"mem": {"enabled": True}},
            fallback=lambda identifier, locale: f"[{locale}:{identifier}]",
        )
        manager = I18nManager(config, emitter=MagicMock())
        manager.register_loader("mem", static_loader({"en": {}}, name="mem"))
        await manager.load_translations()

        assert manager.locale("fr").t("title") == "[fr:title]"

    @pytest.mark.asyncio
    async def test_empty_message_counts_as_missing(self, loaded_manager):
        assert loaded_manager.locale("en").t("empty") == "translation missing: en, empty"

    @pytest.mark.asyncio
    async def test_missing_variable_raises(self, loaded_manager):
        with pytest.raises(ValueError):
            loaded_manager.locale("en").t("greeting")


class TestLookups:
    """Tests for has_message(), has_fallback_message() and switch_locale()."""

    @pytest.mark.asyncio
    async def test_has_message(self, loaded_manager):
        i18n = loaded_manager.locale("fr-CA")

        assert i18n.has_message("greeting") is True
        assert i18n.has_message("fr_only") is False
        assert i18n.has_fallback_message("fr_only") is True

    @pytest.mark.asyncio
    async def test_switch_locale(self, loaded_manager):
        i18n = loaded_manager.locale("en")

        i18n.switch_locale("fr-CA")

        assert i18n.locale == "fr-CA"
        assert i18n.fallback_locale == "fr"
        assert i18n.t("greeting", {"name": "Ada"}) == "Allo Ada"
