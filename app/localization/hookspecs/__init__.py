"""Hook specifications."""

from localization.hookspecs import i18n

__all__ = ["i18n"]
