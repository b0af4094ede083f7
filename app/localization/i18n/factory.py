"""Factory functions for creating the translation manager."""

from typing import Any, Callable, Iterable, Optional

from localization.configuration import Settings, get_settings
from localization.events import Event
from localization.i18n.config import I18nConfig
from localization.i18n.manager import I18nManager
from localization.logging import get_module_logger

logger = get_module_logger()


def create_i18n_manager(
    config: Optional[I18nConfig] = None,
    settings: Optional[Settings] = None,
    emitter: Optional[Callable[[Event], Any]] = None,
    discover_plugins: bool = False,
    plugins: Iterable[object] = (),
) -> I18nManager:
    """Create and configure an I18nManager.

    Translations are not loaded here; await ``load_translations()`` on the
    returned manager.

    Args:
        config: Explicit configuration. Built from ``settings.i18n`` when None.
        settings: Settings to read when no config is given (default: process
            settings).
        emitter: Receiver for missing-translation events (default: event
            dispatcher).
        discover_plugins: Load extension plugins from entry points.
        plugins: Extra plugin objects implementing ``register_i18n_extensions``.

    Returns:
        I18nManager: Configured manager

    Usage:
        # From environment settings
        manager = create_i18n_manager()
        await manager.load_translations()

        # Explicit configuration
        manager = create_i18n_manager(
            config=I18nConfig(default_locale="en", loaders={"fs": {"enabled": True, "location": "locales"}})
        )
    """
    if config is None:
        config = (settings or get_settings()).i18n.to_config()

    manager = I18nManager(config, emitter=emitter)

    plugins = list(plugins)
    if discover_plugins or plugins:
        # pylint: disable=import-outside-toplevel
        from localization.plugins import (
            ENTRY_POINT_GROUP,
            discover_and_register_extensions,
        )

        discover_and_register_extensions(
            manager,
            plugins=plugins,
            entry_point_group=ENTRY_POINT_GROUP if discover_plugins else "",
        )

    logger.info(
        "i18n_manager_created",
        default_locale=config.default_locale,
        translations_format=config.translations_format,
        loaders=[name for name, cfg in config.loaders.items() if cfg.enabled],
    )
    return manager
