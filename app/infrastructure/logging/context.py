"""Language-scoped logging context.

Entries logged while a catalog is reloaded or exported carry the language
being served, the request path and a correlation ID, all held in structlog's
context variables. Blocks nest: an inner block reuses the outer correlation
ID and restores the outer values on exit.
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog


@contextmanager
def bind_language_context(
    language: Optional[str] = None,
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[None]:
    """Bind language context to every log entry emitted inside the block.

    Args:
        language: Language code being resolved, loaded or exported.
        correlation_id: Request identifier. Inherited from an enclosing
            block, or generated, when not given.
        request_path: HTTP path, when serving a request.
        **extra_context: Additional key-value pairs to include in logs.

    Example:
        with bind_language_context(language="fr", request_path="/translations.js"):
            translator.reload_language("fr")
    """
    context: dict[str, Any] = {
        key: value
        for key, value in (("language", language), ("request_path", request_path))
        if value is not None
    }
    if correlation_id is not None:
        context["correlation_id"] = correlation_id
    elif get_correlation_id() is None:
        context["correlation_id"] = str(uuid.uuid4())
    context.update(extra_context)

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_request_context() -> None:
    """Drop every value bound to the logging context."""
    structlog.contextvars.clear_contextvars()
