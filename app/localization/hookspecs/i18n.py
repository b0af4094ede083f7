"""Hook specifications for i18n extension registration."""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from localization.i18n.manager import I18nManager

hookspec = pluggy.HookspecMarker("localization")


@hookspec
def register_i18n_extensions(manager: "I18nManager") -> None:
    """Register custom loaders and formatters with the manager.

    Args:
        manager: Manager to call ``extend``/``register_loader``/
            ``register_formatter`` on.
    """
