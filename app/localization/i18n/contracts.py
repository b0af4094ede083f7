"""Contracts for pluggable catalog sources and message formatters."""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

from localization.i18n.config import I18nConfig

# locale -> (key -> message)
Translations = Mapping[str, Mapping[str, str]]


class CatalogSource(ABC):
    """Produces translations for one or more locales.

    ``load`` may be a plain method or a coroutine. Plain methods are run in
    a worker thread by the manager.
    """

    @abstractmethod
    def load(self) -> Union[Translations, Awaitable[Translations]]:
        """Return a mapping of locale to (key -> message)."""
        raise NotImplementedError()


class MessageFormatter(ABC):
    """Renders a message template for a locale."""

    @abstractmethod
    def format(
        self,
        message: str,
        locale: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Render ``message`` with ``data``."""
        raise NotImplementedError()


LoaderFactory = Callable[[I18nConfig], CatalogSource]
FormatterFactory = Callable[[I18nConfig], MessageFormatter]
