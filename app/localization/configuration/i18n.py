"""i18n feature settings."""

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from localization.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Environment-driven configuration for the translation manager.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when nothing better is known (default: en)
        I18N_SUPPORTED_LOCALES: JSON list of supported locales. When unset the
            manager infers them from the loaded translations.
        I18N_FALLBACK_LOCALES: JSON object mapping a locale to its fallback locale
        I18N_TRANSLATIONS_FORMAT: Name of the message formatter (default: simple)
        I18N_LOCALES_DIR: Directory read by the built-in filesystem loader
        I18N_FS_LOADER_ENABLED: Enable the built-in filesystem loader (default: True)

    Example:
        ```python
        from localization.configuration import get_settings

        settings = get_settings()
        config = settings.i18n.to_config()
        ```
    """

    default_locale: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    supported_locales: Optional[List[str]] = Field(
        default=None, alias="I18N_SUPPORTED_LOCALES"
    )
    fallback_locales: Optional[Dict[str, str]] = Field(
        default=None, alias="I18N_FALLBACK_LOCALES"
    )
    translations_format: str = Field(default="simple", alias="I18N_TRANSLATIONS_FORMAT")
    locales_dir: Path = Field(default=Path("locales"), alias="I18N_LOCALES_DIR")
    fs_loader_enabled: bool = Field(default=True, alias="I18N_FS_LOADER_ENABLED")

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Reject blank default locales."""
        if not v or not v.strip():
            raise ValueError("I18N_DEFAULT_LOCALE must not be empty")
        return v.strip()

    def to_config(self):
        """Build the manager configuration from these settings.

        Returns:
            I18nConfig with the built-in filesystem loader configured.
        """
        # pylint: disable=import-outside-toplevel
        from localization.i18n.config import I18nConfig, LoaderConfig

        return I18nConfig(
            default_locale=self.default_locale,
            supported_locales=self.supported_locales,
            fallback_locales=self.fallback_locales,
            translations_format=self.translations_format,
            loaders={
                "fs": LoaderConfig(
                    enabled=self.fs_loader_enabled,
                    location=str(self.locales_dir),
                )
            },
        )
