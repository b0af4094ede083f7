"""Exceptions raised by the translation manager."""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            await manager.reload_translations()
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """


class ConfigurationError(I18nError):
    """Raised when the configuration refers to something that does not exist.

    Configuration errors are fatal and never retried.
    """


class InvalidLoaderError(ConfigurationError):
    """Raised when an enabled loader has no registered factory.

    Example:
        >>> await manager.reload_translations()
        Traceback (most recent call last):
        ...
        InvalidLoaderError: Invalid i18n loader "db"
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Invalid i18n loader "{name}"')


class InvalidFormatterError(ConfigurationError):
    """Raised when the configured translations format has no registered factory.

    Example:
        >>> manager.get_formatter()
        Traceback (most recent call last):
        ...
        InvalidFormatterError: Invalid i18n formatter "icu"
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Invalid i18n formatter "{name}"')


class InvalidTranslationsError(I18nError):
    """Raised when a loader returns something other than locale -> messages."""
