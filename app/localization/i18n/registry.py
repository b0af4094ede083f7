"""Name -> factory registries for loaders and formatters."""

from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from localization.i18n.exceptions import ConfigurationError
from localization.logging import get_module_logger

logger = get_module_logger()

F = TypeVar("F", bound=Callable)


class ExtensionRegistry(Generic[F]):
    """Registry of factories keyed by name.

    Entries are only ever added or overwritten, never removed. Lookups
    happen at use time, so factories registered after the owner was
    created are still honored.

    Attributes:
        kind: Human readable kind used in logs ("loader", "formatter").
    """

    def __init__(
        self,
        kind: str,
        error_cls: Type[ConfigurationError],
        builtins: Optional[Dict[str, F]] = None,
    ):
        self.kind = kind
        self._error_cls = error_cls
        self._factories: Dict[str, F] = dict(builtins or {})

    def register(self, name: str, factory: F) -> None:
        """Store ``factory`` under ``name``, replacing any previous entry."""
        replaced = name in self._factories
        self._factories[name] = factory
        logger.debug(
            "extension_registered", kind=self.kind, name=name, replaced=replaced
        )

    def get(self, name: str) -> Optional[F]:
        return self._factories.get(name)

    def resolve(self, name: str) -> F:
        """Return the factory for ``name``.

        Raises:
            ConfigurationError: The registry's error class when ``name`` is
                not registered.
        """
        factory = self._factories.get(name)
        if factory is None:
            logger.error(f"invalid_{self.kind}", name=name, available=self.names())
            raise self._error_cls(name)
        return factory

    def names(self) -> List[str]:
        return list(self._factories.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._factories
