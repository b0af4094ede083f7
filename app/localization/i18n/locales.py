"""Supported locale inference and fallback locale resolution."""

from typing import Iterable, List, Mapping, Optional


def infer_locales(
    default_locale: str,
    fallback_locales: Optional[Mapping[str, str]] = None,
    discovered: Iterable[str] = (),
) -> List[str]:
    """Compute the supported locales when none are configured.

    The list is the default locale, then the fallback locale keys in
    declaration order, then every discovered locale. Each locale appears
    once, at its first position.

    Args:
        default_locale: Configured default locale.
        fallback_locales: Configured fallback map, if any.
        discovered: Locales found in the loaded translations.

    Returns:
        Ordered list of locales without duplicates.

    Example:
        >>> infer_locales("en", {"fr-CA": "fr"}, ["en", "fr", "es"])
        ['en', 'fr-CA', 'fr', 'es']
    """
    inferred = [default_locale]
    candidates = list(fallback_locales.keys()) if fallback_locales else []
    candidates.extend(discovered)

    for locale in candidates:
        if locale not in inferred:
            inferred.append(locale)

    return inferred


def resolve_fallback_locale(
    locale: str,
    default_locale: str,
    fallback_locales: Optional[Mapping[str, str]] = None,
) -> str:
    """Return the locale to use in place of ``locale``.

    Uses the configured fallback for ``locale`` when there is one and the
    default locale otherwise. Never returns None.
    """
    if not fallback_locales:
        return default_locale
    return fallback_locales.get(locale) or default_locale
