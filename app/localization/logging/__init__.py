"""Structured logging built on structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - add_app_info(): Processor to add app name/version

Example:
    from localization.logging import get_module_logger

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from localization.logging.formatters import add_app_info
from localization.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "add_app_info",
]
