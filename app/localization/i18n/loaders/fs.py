"""Filesystem catalog source.

Reads YAML and JSON translation files laid out per locale:

    <location>/en/messages.yaml        -> en, keys prefixed with "messages."
    <location>/en/emails/welcome.json  -> en, keys prefixed with "emails.welcome."
    <location>/fr.yaml                 -> fr, keys without prefix

Nested objects are flattened to dot-separated keys.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Tuple, Union

import yaml

from localization.i18n.config import I18nConfig, LoaderConfig
from localization.i18n.contracts import CatalogSource
from localization.logging import get_module_logger

logger = get_module_logger()

SUPPORTED_EXTENSIONS = (".json", ".yaml", ".yml")


class FsLoader(CatalogSource):
    """Loads translations from a directory of YAML/JSON files.

    Attributes:
        location: Directory containing the translation files.
    """

    def __init__(self, location: Union[str, Path]):
        self.location = Path(location)

    @classmethod
    def from_config(cls, config: I18nConfig) -> "FsLoader":
        """Build the loader from the ``fs`` entry of the manager config.

        Raises:
            ValueError: If the ``fs`` loader has no ``location`` option.
        """
        loader_config = config.loaders.get("fs") or LoaderConfig()
        location = getattr(loader_config, "location", None)
        if not location:
            raise ValueError('The "fs" loader requires a "location" option')
        return cls(location)

    def load(self) -> Dict[str, Dict[str, str]]:
        """Read every translation file below ``location``.

        Returns:
            Mapping of locale to flattened (key -> message) mapping. Empty
            when the directory does not exist.

        Raises:
            ValueError: If a file cannot be parsed.
        """
        translations: Dict[str, Dict[str, str]] = {}

        if not self.location.is_dir():
            logger.warning("translations_dir_not_found", location=str(self.location))
            return translations

        file_count = 0
        for path in sorted(self.location.rglob("*")):
            if not path.is_file() or path.suffix.lower() not in SUPPORTED_EXTENSIONS:
                continue

            locale, prefix = self._locale_and_prefix(path)
            data = self._read_file(path)
            if data is None:
                continue
            if not isinstance(data, Mapping):
                logger.warning(
                    "invalid_translations_file", file=str(path), expected="mapping"
                )
                continue

            messages = translations.setdefault(locale, {})
            messages.update(dict(flatten_messages(data, prefix)))
            file_count += 1

        logger.info(
            "loaded_translation_files",
            location=str(self.location),
            file_count=file_count,
            locale_count=len(translations),
        )
        return translations

    def _locale_and_prefix(self, path: Path) -> Tuple[str, str]:
        relative = path.relative_to(self.location).with_suffix("")
        parts = relative.parts
        if len(parts) == 1:
            return parts[0], ""
        return parts[0], ".".join(parts[1:])

    @staticmethod
    def _read_file(path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    return json.load(f)
                return yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            logger.error("translations_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e


def flatten_messages(data: Mapping[str, Any], prefix: str = "") -> Iterator[Tuple[str, str]]:
    """Yield (dot.separated.key, message) pairs for a nested mapping.

    None values are skipped and other non-string leaves are converted with
    ``str``.

    Example:
        >>> dict(flatten_messages({"greeting": {"hello": "Hi"}}, "messages"))
        {'messages.greeting.hello': 'Hi'}
    """
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            yield from flatten_messages(value, full_key)
        elif value is not None:
            yield full_key, value if isinstance(value, str) else str(value)
