"""Configuration model consumed by the translation manager."""

from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

FallbackMessageFn = Callable[[str, str], Optional[str]]


class LoaderConfig(BaseModel):
    """Options for a single catalog source.

    Only ``enabled`` is understood by the manager. Any other option is kept
    as an extra attribute and read by the loader itself (for example
    ``location`` for the filesystem loader).
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    enabled: bool = False


class I18nConfig(BaseModel):
    """Translation manager configuration.

    Attributes:
        default_locale: Locale used when no better match exists.
        supported_locales: Explicit list of supported locales. When None the
            manager infers them from the fallback locales and loaded data.
        fallback_locales: Locale -> locale to use in its place.
        loaders: Source name -> options, in the order sources are merged.
        translations_format: Name of the message formatter.
        fallback: Optional function returning a message for a missing
            (identifier, locale) pair.
    """

    model_config = ConfigDict(frozen=True)

    default_locale: str = Field(min_length=1)
    supported_locales: Optional[List[str]] = None
    fallback_locales: Optional[Dict[str, str]] = None
    loaders: Dict[str, LoaderConfig] = Field(default_factory=dict)
    translations_format: str = "simple"
    fallback: Optional[FallbackMessageFn] = None
