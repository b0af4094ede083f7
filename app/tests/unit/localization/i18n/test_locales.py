"""Tests for localization.i18n.locales module."""

import pytest

from localization.i18n.locales import infer_locales, resolve_fallback_locale

pytestmark = pytest.mark.unit


class TestInferLocales:
    """Tests for infer_locales()."""

    def test_default_only(self):
        assert infer_locales("en") == ["en"]

    def test_default_first_then_fallback_keys_then_discovered(self):
        result = infer_locales("en", {"fr-CA": "fr"}, ["en", "fr", "es"])

        assert result == ["en", "fr-CA", "fr", "es"]

    def test_fallback_targets_are_not_added(self):
        """Only the keys of the fallback map are supported locales."""
        assert infer_locales("en", {"pt-BR": "pt"}) == ["en", "pt-BR"]

    def test_no_duplicates(self):
        result = infer_locales("en", {"en": "fr", "fr": "en"}, ["fr", "en", "de", "de"])

        assert result == ["en", "fr", "de"]
        assert len(result) == len(set(result))

    def test_discovered_only(self):
        assert infer_locales("en", None, ("fr", "es")) == ["en", "fr", "es"]


class TestResolveFallbackLocale:
    """Tests for resolve_fallback_locale()."""

    def test_configured_fallback(self):
        assert resolve_fallback_locale("fr-CA", "en", {"fr-CA": "fr"}) == "fr"

    def test_default_when_not_configured(self):
        assert resolve_fallback_locale("de", "en", {"fr-CA": "fr"}) == "en"

    def test_default_without_map(self):
        assert resolve_fallback_locale("de", "en") == "en"
        assert resolve_fallback_locale("de", "en", {}) == "en"

    def test_empty_locale(self):
        assert resolve_fallback_locale("", "en", {"fr-CA": "fr"}) == "en"

    def test_empty_target_uses_default(self):
        assert resolve_fallback_locale("fr-CA", "en", {"fr-CA": ""}) == "en"
