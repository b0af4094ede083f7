"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: i18n feature settings
    get_settings: Cached settings singleton

Example:
    ```python
    from localization.configuration import get_settings

    settings = get_settings()
    log_level = settings.LOG_LEVEL
    ```
"""

from functools import lru_cache

from localization.configuration.i18n import I18nSettings
from localization.configuration.settings import Settings


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings singleton.

    Returns:
        Settings instance, created on first call.
    """
    return Settings()


__all__ = ["Settings", "I18nSettings", "get_settings"]
