"""Factory functions for creating i18n components.

Wires the store, loader, locale deriver, resolver and export builder
around one CatalogStore so they all share a single lock.
"""

from typing import TYPE_CHECKING, Optional

import pluggy

from infrastructure.i18n.export import ClientExportBuilder
from infrastructure.i18n.loader import CatalogLoader
from infrastructure.i18n.locale_deriver import LocaleDeriver
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.i18n.store import CatalogStore
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import TranslationSettings

logger = get_module_logger()


def create_translator(
    settings: "TranslationSettings",
    plugin_manager: Optional[pluggy.PluginManager] = None,
    store: Optional[CatalogStore] = None,
    locale_deriver: Optional[LocaleDeriver] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        settings: Translation settings (directory, default language, ...).
        plugin_manager: Plugin manager carrying the translation hooks.
        store: Existing store to share (default: a new empty store).
        locale_deriver: Locale deriver to use (default: built from settings).

    Returns:
        Translator: Configured translator, with nothing loaded yet.

    Usage:
        translator = create_translator(settings.translations, get_translation_plugin_manager())
        translator.reload_language("fr")
    """
    store = store if store is not None else CatalogStore()
    if locale_deriver is None:
        locale_deriver = LocaleDeriver(enabled=settings.APPLY_LOCALE)

    loader = CatalogLoader(
        store=store,
        translations_dir=settings.translations_dir,
        default_language=settings.DEFAULT_LANGUAGE,
        locale_deriver=locale_deriver,
    )
    exporter = ClientExportBuilder(
        store=store,
        plugin_manager=plugin_manager,
        strict=settings.STRICT_CLIENT_EXPORT,
        table_name=settings.CLIENT_TRANSLATIONS_OBJECT,
        function_name=settings.CLIENT_TRANSLATE_FUNCTION,
    )
    translator = Translator(
        store=store,
        loader=loader,
        resolver=LanguageResolver(plugin_manager=plugin_manager),
        exporter=exporter,
        plugin_manager=plugin_manager,
    )

    logger.info(
        "translator_created",
        translations_dir=str(settings.translations_dir),
        default_language=settings.DEFAULT_LANGUAGE,
    )
    return translator
