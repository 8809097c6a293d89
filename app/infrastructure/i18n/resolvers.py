"""Language resolution for the current execution context.

The language is resolved once per context: the request hint seeds a
mutable guess, ``get_language`` hook implementations may overwrite it, and
the outcome is cached until reset().
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

import pluggy

from infrastructure.i18n.models import LanguageHint
from infrastructure.logging import get_module_logger

logger = get_module_logger().bind(component="i18n.resolver")


class LanguageResolver:
    """Memoized, hook-overridable language resolution.

    The cache is a context variable, so every thread and every asyncio task
    context resolves on its own.

    Attributes:
        plugin_manager: Plugin manager whose ``get_language`` hook is called.
    """

    def __init__(self, plugin_manager: Optional[pluggy.PluginManager] = None):
        self.plugin_manager = plugin_manager
        self._resolved: ContextVar[Optional[str]] = ContextVar(
            f"resolved_language_{id(self)}", default=None
        )

    def resolve(self, request_hint: Optional[str] = "") -> str:
        """Return the language for the current context.

        Args:
            request_hint: Candidate language, usually the ``language``
                request parameter. Ignored once a language is resolved.

        Returns:
            The resolved language code ("" if nothing picked one).
        """
        resolved = self._resolved.get()
        if resolved is not None:
            return resolved

        hint = LanguageHint(language=request_hint or "", request_hint=request_hint)
        if self.plugin_manager is not None:
            self.plugin_manager.hook.get_language(hint=hint)

        language = hint.language or ""
        self._resolved.set(language)
        logger.info(
            "language_resolved",
            language=language,
            request_hint=request_hint,
            overridden=language != (request_hint or ""),
        )
        return language

    def reset(self) -> None:
        """Forget the resolved language so the next resolve() runs the hook again."""
        self._resolved.set(None)

    @contextmanager
    def context(self) -> Iterator[None]:
        """Scope a fresh resolution to the block, e.g. one HTTP request.

        The language resolved inside the block is discarded on exit and the
        previous resolution, if any, is restored.
        """
        token = self._resolved.set(None)
        try:
            yield
        finally:
            self._resolved.reset(token)

    @property
    def is_resolved(self) -> bool:
        return self._resolved.get() is not None
