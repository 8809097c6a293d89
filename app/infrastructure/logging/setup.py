"""structlog configuration.

Logging is configured when this module is first imported, before any
module-level logger is bound, and can be reconfigured later (the server
lifespan does so with the resolved settings). Under pytest every entry is
dropped.
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    add_service_info,
    summarize_catalog_values,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

SERVICE_NAME = "translation-catalog"

# Above CRITICAL: nothing reaches the handlers
SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(settings: "Settings", json_output: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_info(SERVICE_NAME, settings.GIT_SHA),
        summarize_catalog_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard library root logger.

    Args:
        settings: Source of LOG_LEVEL, GIT_SHA and the production flag.
            Defaults to the application settings singleton.
        log_level: Overrides ``settings.LOG_LEVEL``.
        is_production: Overrides ``settings.is_production``; production
            renders JSON, development renders for the console.

    Returns:
        A logger bound to the new configuration.
    """
    if _is_test_environment():
        structlog.configure(
            processors=[structlog.stdlib.add_log_level, structlog.dev.ConsoleRenderer()],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=SILENT, force=True)
        return structlog.stdlib.get_logger()

    if settings is None:
        from infrastructure.configuration import settings as app_settings

        settings = app_settings

    json_output = settings.is_production if is_production is None else is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=_build_processors(settings, json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
        force=True,
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    The logger carries ``component`` (last dotted segment) and
    ``module_path`` (full module name).

    Example:
        # in infrastructure/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "infrastructure.i18n.loader"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(component=module_name.rsplit(".", 1)[-1], module_path=module_name)
