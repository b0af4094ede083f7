"""HTTP Accept-Language negotiation against a list of supported locales.

Ranking follows the usual HTTP content negotiation rules: quality values,
wildcards, case-insensitive tags and region-subtag specificity.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from localization.logging import get_module_logger

logger = get_module_logger()

_LANGUAGE_RANGE = re.compile(r"^\s*([^\s\-;]+)(?:-([^\s;]+))?\s*(?:;(.*))?$")

# Specificity of a supported locale against an accepted language range
EXACT_MATCH = 4
PREFIX_MATCH = 2
REGION_MATCH = 1
WILDCARD_MATCH = 0


@dataclass(frozen=True)
class LanguageRange:
    """One entry of an Accept-Language header.

    Attributes:
        prefix: Primary language subtag (e.g., "fr" from "fr-CA").
        suffix: Remaining subtags, if any (e.g., "CA").
        quality: Weight from the ``q`` parameter, 1.0 when absent.
        index: Position of the entry in the header.
    """

    prefix: str
    suffix: Optional[str]
    quality: float
    index: int

    @property
    def full(self) -> str:
        return f"{self.prefix}-{self.suffix}" if self.suffix else self.prefix

    @classmethod
    def parse(cls, value: str, index: int = 0) -> Optional["LanguageRange"]:
        """Parse a single language range.

        Returns:
            LanguageRange, or None if ``value`` is not a language range.
        """
        match = _LANGUAGE_RANGE.match(value)
        if not match:
            return None

        prefix, suffix, params = match.groups()
        quality = 1.0
        if params:
            for param in params.split(";"):
                key, _, raw = param.strip().partition("=")
                if key.strip() == "q":
                    quality = _parse_quality(raw)
                    break

        return cls(prefix=prefix, suffix=suffix, quality=quality, index=index)


@dataclass(frozen=True)
class LanguagePriority:
    """How well a supported locale matches the accepted ranges."""

    index: int
    order: int
    quality: float
    specificity: int


def _parse_quality(raw: str) -> float:
    """Parse a q value. Values that do not parse are never acceptable."""
    match = re.match(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", raw)
    if not match:
        return 0.0
    return float(match.group(1))


class LanguageNegotiator:
    """Selects the best supported locale for a language preference."""

    @staticmethod
    def parse_accept_language(header: str) -> List[LanguageRange]:
        """Parse an Accept-Language header into language ranges.

        Entries that are not language ranges are dropped.
        """
        ranges = []
        for index, part in enumerate(header.split(",")):
            language_range = LanguageRange.parse(part.strip(), index)
            if language_range is not None:
                ranges.append(language_range)
        return ranges

    @staticmethod
    def specify(
        locale: str, accepted: LanguageRange, index: int
    ) -> Optional[LanguagePriority]:
        """Score a supported locale against one accepted range.

        Returns:
            LanguagePriority, or None when the range does not cover the locale.
        """
        parsed = LanguageRange.parse(locale, index)
        if parsed is None:
            return None

        accepted_full = accepted.full.lower()
        if accepted_full == parsed.full.lower():
            specificity = EXACT_MATCH
        elif accepted.prefix.lower() == parsed.full.lower():
            specificity = PREFIX_MATCH
        elif accepted_full == parsed.prefix.lower():
            specificity = REGION_MATCH
        elif accepted.full == "*":
            specificity = WILDCARD_MATCH
        else:
            return None

        return LanguagePriority(
            index=index,
            order=accepted.index,
            quality=accepted.quality,
            specificity=specificity,
        )

    @classmethod
    def get_priority(
        cls, locale: str, accepted: Sequence[LanguageRange], index: int
    ) -> LanguagePriority:
        """Best match of ``locale`` among all accepted ranges."""
        best = LanguagePriority(index=index, order=-1, quality=0.0, specificity=0)

        for language_range in accepted:
            candidate = cls.specify(locale, language_range, index)
            if candidate is None:
                continue
            if (best.specificity, best.quality, best.order) < (
                candidate.specificity,
                candidate.quality,
                candidate.order,
            ):
                best = candidate

        return best

    @classmethod
    def preferred_languages(
        cls, header: str, available: Sequence[str]
    ) -> List[str]:
        """Order ``available`` locales by preference, dropping unacceptable ones."""
        accepted = cls.parse_accept_language(header)
        priorities = [
            cls.get_priority(locale, accepted, index)
            for index, locale in enumerate(available)
        ]
        acceptable = [priority for priority in priorities if priority.quality > 0]
        acceptable.sort(
            key=lambda p: (-p.quality, -p.specificity, p.order, p.index)
        )
        return [available[priority.index] for priority in acceptable]

    @classmethod
    def negotiate(
        cls,
        preference: Union[str, Sequence[str]],
        available: Sequence[str],
    ) -> Optional[str]:
        """Return the best supported locale for a language preference.

        Args:
            preference: Accept-Language value, or a list of values.
            available: Supported locales.

        Returns:
            Best matching locale from ``available``, or None if none match.

        Example:
            >>> LanguageNegotiator.negotiate("fr-CA;q=0.9,en;q=0.5", ["en", "fr"])
            'fr'
        """
        header = preference if isinstance(preference, str) else ",".join(preference)
        preferred = cls.preferred_languages(header, available)
        if not preferred:
            logger.debug("no_matching_locale", preference=header)
            return None
        return preferred[0]
