"""i18n system - translation coordination.

Aggregates translations from pluggable catalog sources, picks the best
locale for a language preference and resolves fallback locales.

Main components:
- manager: I18nManager, the coordination facade
- i18n: I18n, the per-locale message renderer
- config: I18nConfig and LoaderConfig
- contracts: CatalogSource and MessageFormatter interfaces
- negotiation: LanguageNegotiator for Accept-Language matching
- loaders/formatters: built-in "fs" loader and "simple" formatter
"""

from localization.i18n.config import I18nConfig, LoaderConfig
from localization.i18n.contracts import CatalogSource, MessageFormatter, Translations
from localization.i18n.exceptions import (
    ConfigurationError,
    I18nError,
    InvalidFormatterError,
    InvalidLoaderError,
    InvalidTranslationsError,
)
from localization.i18n.factory import create_i18n_manager
from localization.i18n.formatters import SimpleMessageFormatter
from localization.i18n.i18n import I18n
from localization.i18n.loaders import FsLoader
from localization.i18n.locales import infer_locales, resolve_fallback_locale
from localization.i18n.manager import I18nManager
from localization.i18n.models import TranslationStore
from localization.i18n.negotiation import LanguageNegotiator
from localization.i18n.registry import ExtensionRegistry

__all__ = [
    "I18nManager",
    "I18n",
    "I18nConfig",
    "LoaderConfig",
    "CatalogSource",
    "MessageFormatter",
    "Translations",
    "TranslationStore",
    "ExtensionRegistry",
    "LanguageNegotiator",
    "FsLoader",
    "SimpleMessageFormatter",
    "infer_locales",
    "resolve_fallback_locale",
    "create_i18n_manager",
    "I18nError",
    "ConfigurationError",
    "InvalidLoaderError",
    "InvalidFormatterError",
    "InvalidTranslationsError",
]
