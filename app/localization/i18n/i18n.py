"""Per-locale facade used to render messages."""

from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, NamedTuple, Optional

from localization.events import Event, missing_translation_event

if TYPE_CHECKING:
    from localization.i18n.manager import I18nManager


class _Lookup(NamedTuple):
    message: str
    is_fallback: bool


class I18n:
    """Renders messages for a single locale.

    Messages are looked up in the locale first and then in its fallback
    locale. Every lookup that misses the locale emits a missing-translation
    event.

    Attributes:
        locale: Active locale.
        fallback_locale: Locale consulted when a key is missing.
        locale_translations: Messages of the active locale.
        fallback_translations: Messages of the fallback locale.
    """

    def __init__(
        self,
        locale: str,
        emitter: Callable[[Event], Any],
        manager: "I18nManager",
    ):
        self._emitter = emitter
        self._manager = manager
        self.locale = locale
        self._load_translations()

    def _load_translations(self) -> None:
        self.fallback_locale = self._manager.get_fallback_locale_for(self.locale)
        self.locale_translations: Mapping[str, str] = (
            self._manager.get_translations_for(self.locale)
        )
        self.fallback_translations: Mapping[str, str] = (
            self._manager.get_translations_for(self.fallback_locale)
        )

    def _get_message(self, identifier: str) -> Optional[_Lookup]:
        message = self.locale_translations.get(identifier)
        if message:
            return _Lookup(message, False)

        message = self.fallback_translations.get(identifier)
        if message:
            return _Lookup(message, True)

        return None

    def _notify_missing_translation(self, identifier: str, has_fallback: bool) -> None:
        self._emitter(missing_translation_event(identifier, self.locale, has_fallback))

    def _missing_translation_message(self, identifier: str) -> str:
        message = self._manager.get_fallback_message(identifier, self.locale)
        if message is not None:
            return message
        return f"translation missing: {self.locale}, {identifier}"

    def switch_locale(self, locale: str) -> None:
        """Switch to another locale and refresh the cached lookups."""
        self.locale = locale
        self._load_translations()

    def format_message(
        self,
        identifier: str,
        data: Optional[Dict[str, Any]] = None,
        fallback_message: Optional[str] = None,
    ) -> str:
        """Render the message for ``identifier``.

        Args:
            identifier: Translation key.
            data: Values for the message placeholders.
            fallback_message: Text returned when the key is missing from
                both the locale and its fallback locale.

        Returns:
            Rendered message, or the missing-translation text.
        """
        lookup = self._get_message(identifier)

        if lookup is None or lookup.is_fallback:
            self._notify_missing_translation(identifier, lookup is not None)

        if lookup is None:
            if fallback_message is not None:
                return fallback_message
            return self._missing_translation_message(identifier)

        return self._manager.get_formatter().format(lookup.message, self.locale, data)

    t = format_message

    def has_message(self, identifier: str) -> bool:
        """Whether the active locale defines ``identifier``."""
        return identifier in self.locale_translations

    def has_fallback_message(self, identifier: str) -> bool:
        """Whether the fallback locale defines ``identifier``."""
        return identifier in self.fallback_translations
