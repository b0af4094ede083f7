"""Plugin managers and utilities."""

import pluggy

from localization.plugins.i18n import (
    ENTRY_POINT_GROUP,
    create_i18n_plugin_manager,
    discover_and_register_extensions,
)

# Singleton hookimpl marker for the entire application
hookimpl = pluggy.HookimplMarker("localization")

__all__ = [
    "hookimpl",
    "ENTRY_POINT_GROUP",
    "create_i18n_plugin_manager",
    "discover_and_register_extensions",
]
