"""Built-in message formatters."""

from localization.i18n.formatters.simple import SimpleMessageFormatter

__all__ = ["SimpleMessageFormatter"]
