"""Translation coordination manager.

Loads translations from every enabled catalog source, merges them into a
single store, and answers locale questions (supported locales, content
negotiation, fallback locales) for the per-locale I18n facade.
"""

import asyncio
import inspect
import threading
from typing import Any, Callable, List, Literal, Mapping, Optional, Sequence, Tuple, Union

from localization.events import Event, dispatch_event
from localization.i18n.config import I18nConfig
from localization.i18n.contracts import (
    CatalogSource,
    FormatterFactory,
    LoaderFactory,
    MessageFormatter,
    Translations,
)
from localization.i18n.exceptions import InvalidFormatterError, InvalidLoaderError
from localization.i18n.formatters import SimpleMessageFormatter
from localization.i18n.i18n import I18n
from localization.i18n.loaders import FsLoader
from localization.i18n.locales import infer_locales, resolve_fallback_locale
from localization.i18n.models import TranslationStore
from localization.i18n.negotiation import LanguageNegotiator
from localization.i18n.registry import ExtensionRegistry
from localization.logging import get_module_logger

logger = get_module_logger()

EventEmitter = Callable[[Event], Any]


class I18nManager:
    """Coordinates translation loading and locale resolution.

    The manager owns the merged translation store, the cached formatter and
    the loader/formatter registries. Configuration is read-only.

    Translations returned by ``get_translations`` and ``get_translations_for``
    are read-only views of the current snapshot; a reload swaps in a new
    snapshot instead of editing the old one.

    At most one reload runs at a time. Callers that ask for a reload (or an
    initial load) while one is running wait for that reload and share its
    outcome.

    Attributes:
        config: The manager configuration.

    Example:
        manager = I18nManager(config)
        await manager.load_translations()
        locale = manager.get_supported_locale_for("fr-CA,en;q=0.5") or manager.default_locale
        print(manager.locale(locale).t("messages.greeting", {"name": "Ada"}))
    """

    def __init__(self, config: I18nConfig, emitter: Optional[EventEmitter] = None):
        """Initialize the manager.

        Args:
            config: Translation configuration.
            emitter: Callable receiving missing-translation events. Defaults
                to the in-process event dispatcher.
        """
        self.config = config
        self._emitter = emitter or dispatch_event

        self._loaders: ExtensionRegistry[LoaderFactory] = ExtensionRegistry(
            "loader", InvalidLoaderError, {"fs": FsLoader.from_config}
        )
        self._formatters: ExtensionRegistry[FormatterFactory] = ExtensionRegistry(
            "formatter", InvalidFormatterError, {"simple": SimpleMessageFormatter}
        )

        self._formatter: Optional[MessageFormatter] = None
        self._formatter_lock = threading.Lock()

        self._store = TranslationStore()
        self._inferred_locales = infer_locales(
            config.default_locale, config.fallback_locales
        )
        self._has_cached_translations = False
        self._inflight_reload: Optional[asyncio.Future] = None

    @property
    def default_locale(self) -> str:
        return self.config.default_locale

    @property
    def has_cached_translations(self) -> bool:
        """Whether translations have been loaded.

        Use ``reload_translations`` to fetch them again.
        """
        return self._has_cached_translations

    def supported_locales(self) -> List[str]:
        """Locales supported by the application.

        Returns the configured list when there is one, otherwise the list
        inferred from the fallback locales and the loaded translations.
        """
        if self.config.supported_locales is not None:
            return list(self.config.supported_locales)
        return list(self._inferred_locales)

    def get_translations(self) -> Mapping[str, Mapping[str, str]]:
        """Read-only view of all loaded translations."""
        return self._store.translations

    def get_translations_for(self, locale: str) -> Mapping[str, str]:
        """Read-only view of the translations for ``locale`` (empty if unknown)."""
        return self._store.for_locale(locale)

    def get_formatter(self) -> MessageFormatter:
        """Return the formatter selected by ``translations_format``.

        The formatter is resolved on first use, so formatters registered after
        the manager was created are honored, and then cached.

        Raises:
            InvalidFormatterError: If no formatter is registered under
                ``translations_format``.
        """
        if self._formatter is None:
            with self._formatter_lock:
                if self._formatter is None:
                    factory = self._formatters.resolve(self.config.translations_format)
                    self._formatter = factory(self.config)
                    logger.debug(
                        "formatter_created", formatter=self.config.translations_format
                    )
        return self._formatter

    async def load_translations(self) -> None:
        """Load translations unless they are already cached.

        Loaded translations are cached until ``reload_translations`` is called.
        """
        if not self._has_cached_translations:
            await self.reload_translations()

    async def reload_translations(self) -> None:
        """Reload translations from every enabled loader.

        The existing translations are left untouched when a loader fails.

        Raises:
            InvalidLoaderError: If an enabled loader is not registered.
            Exception: Whatever an individual loader raised.
        """
        if self._inflight_reload is None:
            self._inflight_reload = asyncio.ensure_future(self._reload())
            self._inflight_reload.add_done_callback(self._clear_inflight_reload)
        else:
            logger.debug("joining_inflight_reload")

        await asyncio.shield(self._inflight_reload)

    def _clear_inflight_reload(self, future: asyncio.Future) -> None:
        if self._inflight_reload is future:
            self._inflight_reload = None

    async def _reload(self) -> None:
        log = logger.bind(loaders=list(self.config.loaders.keys()))
        log.info("loading_translations")

        factories = self._resolve_loader_factories()

        try:
            sources = [(name, factory(self.config)) for name, factory in factories]
            # Wait for every source; the first failure in declaration order wins
            results = await asyncio.gather(
                *(self._load_source(name, source) for name, source in sources),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            store = TranslationStore.merge(results)
        except Exception as e:
            log.error("translations_reload_failed", error=str(e))
            raise

        self._store = store
        self._inferred_locales = infer_locales(
            self.config.default_locale,
            self.config.fallback_locales,
            store.discovered_locales,
        )
        self._has_cached_translations = True

        log.info(
            "translations_loaded",
            source_count=len(sources),
            locale_count=len(store.translations),
        )

    def _resolve_loader_factories(self) -> List[Tuple[str, LoaderFactory]]:
        """Factories of the enabled loaders, in declaration order."""
        return [
            (name, self._loaders.resolve(name))
            for name, loader_config in self.config.loaders.items()
            if loader_config.enabled
        ]

    @staticmethod
    async def _load_source(name: str, source: CatalogSource) -> Translations:
        if inspect.iscoroutinefunction(source.load):
            result = await source.load()
        else:
            result = await asyncio.to_thread(source.load)
            if inspect.isawaitable(result):
                result = await result

        logger.debug("loader_completed", loader=name)
        return result

    def get_supported_locale_for(
        self, user_language: Union[str, Sequence[str]]
    ) -> Optional[str]:
        """Best supported locale for an Accept-Language style preference.

        Args:
            user_language: Accept-Language value or list of values.

        Returns:
            Matching supported locale, or None.
        """
        return LanguageNegotiator.negotiate(user_language, self.supported_locales())

    def get_fallback_locale_for(self, locale: str) -> str:
        """Locale to use when ``locale`` (or a key in it) is unavailable.

        Returns the default locale when no fallback is configured.
        """
        return resolve_fallback_locale(
            locale, self.config.default_locale, self.config.fallback_locales
        )

    def get_fallback_message(self, identifier: str, locale: str) -> Optional[str]:
        """Message from the configured ``fallback`` function, if any."""
        if self.config.fallback is None:
            return None
        return self.config.fallback(identifier, locale)

    def register_loader(self, name: str, factory: LoaderFactory) -> None:
        self._loaders.register(name, factory)

    def register_formatter(self, name: str, factory: FormatterFactory) -> None:
        self._formatters.register(name, factory)

    def extend(
        self,
        name: str,
        kind: Literal["loader", "formatter"],
        factory: Union[LoaderFactory, FormatterFactory],
    ) -> None:
        """Add a custom loader or formatter.

        Raises:
            ValueError: If ``kind`` is neither "loader" nor "formatter".
        """
        logger.debug("adding_custom_extension", kind=kind, name=name)

        if kind == "loader":
            self.register_loader(name, factory)
        elif kind == "formatter":
            self.register_formatter(name, factory)
        else:
            raise ValueError(f'Unknown i18n extension kind "{kind}"')

    def locale(self, locale: str) -> I18n:
        """Return an I18n facade for ``locale`` bound to this manager."""
        return I18n(locale, self._emitter, self)
