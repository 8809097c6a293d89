"""Translation service tying the catalog components together.

Sequences full reloads (default language, then the requested language,
then plugin translations) and offers lookups on the loaded catalog.
"""

import html
from typing import Any, Optional

import pluggy

from infrastructure.i18n.errors import MissingCatalogEntry
from infrastructure.i18n.export import ClientExportBuilder
from infrastructure.i18n.loader import CatalogLoader
from infrastructure.i18n.models import KEY_SEPARATOR, TranslationKey
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.i18n.store import CatalogStore
from infrastructure.logging import bind_language_context, get_module_logger

logger = get_module_logger()


def clean(text: str) -> str:
    """Trim whitespace and decode HTML entities (quotes included)."""
    return html.unescape(text.strip())


class Translator:
    """Reload orchestrator and lookup facade for the catalog.

    Every multi-step operation holds the store lock for its whole duration,
    so other threads never read a half-reloaded catalog.

    Attributes:
        store: Catalog store shared by every component.
        loader: Loads language files into the store.
        resolver: Resolves the language of the current context.
        exporter: Builds the client-side translation script.
        plugin_manager: Plugin manager for ``load_plugin_translations``.
    """

    def __init__(
        self,
        store: CatalogStore,
        loader: CatalogLoader,
        resolver: LanguageResolver,
        exporter: ClientExportBuilder,
        plugin_manager: Optional[pluggy.PluginManager] = None,
    ):
        self.store = store
        self.loader = loader
        self.resolver = resolver
        self.exporter = exporter
        self.plugin_manager = plugin_manager

    @property
    def language_default(self) -> str:
        return self.loader.default_language

    @property
    def language_loaded(self) -> Optional[str]:
        return self.store.loaded_language

    def _language_to_load(self, language: Optional[str]) -> str:
        if language:
            return language
        return self.resolver.resolve() or self.language_default

    def reload_language(self, language: Optional[str] = None) -> str:
        """Rebuild the catalog for ``language``.

        Clears the store, loads the default language, loads the requested
        language over it, then lets plugins merge their translations. The
        first failure propagates and the catalog is left as it was at that
        step.

        Args:
            language: Language code; resolved for the current context if empty.

        Returns:
            The language code that was loaded.

        Raises:
            InvalidLanguageCode: If a code fails the filename-safety check.
            LanguageFileNotFound: If the default or requested file is missing.
        """
        language = self._language_to_load(language)
        with bind_language_context(language=language), self.store.lock:
            self.loader.unload_all()
            self.loader.load_default()
            self.loader.load_language_file(language)
            if self.plugin_manager is not None:
                self.plugin_manager.hook.load_plugin_translations(
                    language=language, store=self.store
                )
            logger.info(
                "language_reloaded",
                default_language=self.language_default,
                namespace_count=len(self.store),
            )
        return language

    def load_core_translation(self, language: Optional[str] = None) -> str:
        """Load ``language`` unless it is already the active language.

        Args:
            language: Language code; resolved for the current context if empty.

        Returns:
            The language code that is active afterwards.
        """
        language = self._language_to_load(language)
        with bind_language_context(language=language):
            self.loader.load_if_changed(language)
        return language

    def merge_translations(self, translations: dict) -> None:
        """Merge extra translations into the catalog (see CatalogStore.merge)."""
        self.store.merge(translations)

    def get(self, namespace: str, key: str) -> str:
        """Return a message, raising if it is not in the catalog.

        Raises:
            MissingCatalogEntry: If (namespace, key) is absent.
        """
        message = self.store.get(namespace, key)
        if message is None:
            raise MissingCatalogEntry([str(TranslationKey(namespace, key))])
        return message

    def translate(self, key: str, *args: Any) -> str:
        """Translate a fully-qualified key such as "General_Loading".

        Positional arguments replace ``%s`` placeholders. Unknown keys are
        returned unchanged so missing translations stay visible.

        Args:
            key: Fully-qualified key.
            *args: Values for ``%s`` placeholders.

        Returns:
            Translated message, or ``key`` if it is not in the catalog.
        """
        namespace, _, message_key = key.partition(KEY_SEPARATOR)
        message = self.store.get(namespace, message_key) if message_key else None
        if message is None:
            logger.debug("translation_not_found", key=key)
            return key
        if args:
            try:
                return message % args
            except (TypeError, ValueError) as e:
                logger.warning("translation_format_error", key=key, error=str(e))
                return message
        return message

    def build_export_script(self) -> str:
        """Generate the client-side translation script for the loaded catalog."""
        return self.exporter.build_export_script()

    def export_language(self, language: Optional[str] = None) -> tuple[str, str]:
        """Reload ``language`` and build its client-side script as one step.

        Returns:
            Tuple of (language loaded, script source).
        """
        with self.store.lock:
            language = self.reload_language(language)
            return language, self.build_export_script()
