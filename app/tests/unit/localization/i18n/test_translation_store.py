"""Tests for localization.i18n.models module."""

import pytest

from localization.i18n import InvalidTranslationsError, TranslationStore

pytestmark = pytest.mark.unit


class TestTranslationStoreMerge:
    """Tests for TranslationStore.merge()."""

    def test_empty(self):
        store = TranslationStore.merge([])

        assert dict(store.translations) == {}
        assert store.discovered_locales == ()
        assert store.locales == []

    def test_later_results_override_keys(self):
        store = TranslationStore.merge(
            [
                {"en": {"a": "1", "b": "1"}},
                {"en": {"b": "2"}, "fr": {"a": "un"}},
            ]
        )

        assert dict(store.for_locale("en")) == {"a": "1", "b": "2"}
        assert dict(store.for_locale("fr")) == {"a": "un"}

    def test_discovered_locales_follow_source_order(self):
        store = TranslationStore.merge([{"fr": {}, "en": {}}, {"es": {}, "fr": {}}])

        assert store.discovered_locales == ("fr", "en", "es")

    def test_inputs_are_not_mutated(self):
        first = {"en": {"a": "1"}}
        TranslationStore.merge([first, {"en": {"a": "2"}}])

        assert first == {"en": {"a": "1"}}

    def test_store_is_read_only(self):
        store = TranslationStore.merge([{"en": {"a": "1"}}])

        with pytest.raises(TypeError):
            store.translations["fr"] = {}
        with pytest.raises(TypeError):
            store.for_locale("en")["a"] = "2"

    def test_unknown_locale(self):
        store = TranslationStore.merge([{"en": {"a": "1"}}])

        assert dict(store.for_locale("de")) == {}

    def test_blank_locales_skipped(self):
        store = TranslationStore.merge([{"": {"a": "1"}, "  ": {}, "en": {"a": "1"}}])

        assert store.locales == ["en"]

    def test_non_mapping_result(self):
        with pytest.raises(InvalidTranslationsError, match="#1"):
            TranslationStore.merge([{"en": {}}, None])

    def test_non_mapping_messages(self):
        with pytest.raises(InvalidTranslationsError, match='"en"'):
            TranslationStore.merge([{"en": ["hello"]}])
