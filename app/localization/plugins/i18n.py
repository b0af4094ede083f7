"""i18n extension plugin manager."""

from typing import TYPE_CHECKING, Iterable

import pluggy

from localization import hookspecs
from localization.logging import get_module_logger

if TYPE_CHECKING:
    from localization.i18n.manager import I18nManager

logger = get_module_logger()

ENTRY_POINT_GROUP = "localization.i18n"


def create_i18n_plugin_manager() -> pluggy.PluginManager:
    """Create a plugin manager for i18n extension hooks.

    Returns:
        PluginManager with the i18n hook specifications added.
    """
    pm = pluggy.PluginManager("localization")
    pm.add_hookspecs(hookspecs.i18n)
    return pm


def discover_and_register_extensions(
    manager: "I18nManager",
    plugins: Iterable[object] = (),
    entry_point_group: str = ENTRY_POINT_GROUP,
) -> pluggy.PluginManager:
    """Let plugins register loaders and formatters on ``manager``.

    Plugins come from installed distributions exposing entry points in
    ``entry_point_group`` and from ``plugins``. Each plugin implements
    ``register_i18n_extensions`` with the ``hookimpl`` marker.

    Args:
        manager: Manager receiving the registrations.
        plugins: Extra plugin objects (modules, classes or instances).
        entry_point_group: Entry point group to load. Empty to skip.

    Returns:
        The plugin manager that was used.

    Example:
        >>> from localization.plugins import hookimpl
        >>> class DatabasePlugin:
        ...     @hookimpl
        ...     def register_i18n_extensions(self, manager):
        ...         manager.extend("db", "loader", DatabaseLoader)
        >>> discover_and_register_extensions(manager, plugins=[DatabasePlugin()])
    """
    pm = create_i18n_plugin_manager()

    if entry_point_group:
        loaded = pm.load_setuptools_entrypoints(entry_point_group)
        logger.debug("i18n_entry_points_loaded", group=entry_point_group, count=loaded)

    for plugin in plugins:
        pm.register(plugin)

    pm.hook.register_i18n_extensions(manager=manager)
    logger.info("i18n_extensions_registered", plugin_count=len(pm.get_plugins()))
    return pm
