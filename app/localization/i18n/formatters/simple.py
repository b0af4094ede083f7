"""Placeholder interpolation formatter."""

import re
from typing import Any, Dict, List, Optional

from localization.i18n.config import I18nConfig
from localization.i18n.contracts import MessageFormatter
from localization.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}|\{(\w+)\}")


class SimpleMessageFormatter(MessageFormatter):
    """Replaces ``{{name}}`` and ``{name}`` placeholders with values.

    No plural or select grammar is supported.
    """

    def __init__(self, config: Optional[I18nConfig] = None):
        self.config = config

    def format(
        self,
        message: str,
        locale: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Interpolate ``data`` into ``message``.

        Raises:
            ValueError: If a placeholder has no value in ``data``.
        """
        data = data or {}

        missing = [name for name in self.placeholders(message) if name not in data]
        if missing:
            logger.error(
                "missing_interpolation_variable",
                variables=missing,
                available_variables=list(data.keys()),
                locale=locale,
            )
            raise ValueError(f"Missing interpolation variable: {missing[0]}")

        # Single pass so substituted values are never interpolated again
        return PLACEHOLDER.sub(lambda m: str(data[m.group(1) or m.group(2)]), message)

    @staticmethod
    def placeholders(message: str) -> List[str]:
        """Placeholder names in order of first appearance."""
        names: List[str] = []
        for match in PLACEHOLDER.finditer(message):
            name = match.group(1) or match.group(2)
            if name not in names:
                names.append(name)
        return names
