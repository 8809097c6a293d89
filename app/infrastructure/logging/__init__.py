"""Structured logging for the translation catalog (structlog).

Modules take a logger with ``get_module_logger()`` at import time and log
snake_case events with keyword context::

    logger = get_module_logger()
    logger.info("language_file_loaded", language="fr")

Reload and export code runs inside ``bind_language_context`` so entries
carry the language being served and a correlation ID.
"""

from infrastructure.logging.context import (
    bind_language_context,
    clear_request_context,
    get_correlation_id,
)
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "bind_language_context",
    "clear_request_context",
    "configure_logging",
    "get_correlation_id",
    "get_module_logger",
]
