"""Application settings - main aggregator."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from localization.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """Application settings - main aggregator.

    Environment Variables:
        ENVIRONMENT: Deployment environment name (default: development)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        APP_NAME: Application name attached to log entries

    Example:
        ```python
        from localization.configuration import get_settings

        settings = get_settings()
        if settings.is_production:
            ...
        default_locale = settings.i18n.default_locale
        ```
    """

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    APP_NAME: str = "localization"

    i18n: I18nSettings = Field(default_factory=I18nSettings)

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
