"""Translation store model.

The store is an immutable snapshot of the merged translations. A reload
builds a new snapshot and swaps it in; a snapshot is never edited.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from localization.i18n.contracts import Translations
from localization.i18n.exceptions import InvalidTranslationsError
from localization.logging import get_module_logger

logger = get_module_logger()

EMPTY_MESSAGES: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class TranslationStore:
    """Merged translations for every loaded locale.

    Attributes:
        translations: Read-only locale -> (key -> message) mapping.
        discovered_locales: Locales in the order the sources produced them.
    """

    translations: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    discovered_locales: Tuple[str, ...] = ()

    @classmethod
    def merge(cls, results: Sequence[Translations]) -> "TranslationStore":
        """Shallow merge loader results into a new store.

        Results are merged in the given order and later results override
        keys of earlier ones within the same locale.

        Args:
            results: Loader outputs in source declaration order.

        Returns:
            New TranslationStore.

        Raises:
            InvalidTranslationsError: If a result is not a mapping of mappings.
        """
        merged: Dict[str, Dict[str, str]] = {}
        discovered: List[str] = []

        for position, result in enumerate(results):
            if not isinstance(result, Mapping):
                raise InvalidTranslationsError(
                    f"Loader result #{position} must be a mapping of locales, "
                    f"got {type(result).__name__}"
                )

            for locale, messages in result.items():
                if not isinstance(locale, str) or not locale.strip():
                    logger.warning("skipped_blank_locale", position=position)
                    continue
                if not isinstance(messages, Mapping):
                    raise InvalidTranslationsError(
                        f'Translations for locale "{locale}" must be a mapping, '
                        f"got {type(messages).__name__}"
                    )

                if locale not in discovered:
                    discovered.append(locale)
                merged.setdefault(locale, {}).update(messages)

        return cls(
            translations=MappingProxyType(
                {locale: MappingProxyType(messages) for locale, messages in merged.items()}
            ),
            discovered_locales=tuple(discovered),
        )

    def for_locale(self, locale: str) -> Mapping[str, str]:
        """Messages for ``locale``, or an empty mapping."""
        return self.translations.get(locale, EMPTY_MESSAGES)

    @property
    def locales(self) -> List[str]:
        return list(self.translations.keys())
