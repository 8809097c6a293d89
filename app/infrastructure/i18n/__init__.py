"""i18n system - translation catalog management.

Loads JSON language files into a process-wide catalog, resolves the
language for each execution context and exports a whitelisted subset of
strings to client-side code.

Main components:
- store: CatalogStore and merge_recursive
- loader: CatalogLoader and the is_valid_filename safety check
- locale_deriver: LocaleDeriver applying General.Locale to the process
- resolvers: LanguageResolver with the get_language hook
- export: ClientExportBuilder for the client-side script
- translator: Translator, the reload orchestrator
- errors: TranslationError and its subclasses
"""

from infrastructure.i18n.errors import (
    InvalidLanguageCode,
    LanguageFileNotFound,
    MalformedClientExportKey,
    MalformedLanguageFile,
    MissingCatalogEntry,
    TranslationError,
)
from infrastructure.i18n.export import ClientExportBuilder
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.loader import CatalogLoader, is_valid_filename
from infrastructure.i18n.locale_deriver import LocaleDeriver
from infrastructure.i18n.models import LanguageHint, TranslationKey
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.i18n.store import CatalogStore, merge_recursive
from infrastructure.i18n.translator import Translator, clean

__all__ = [
    "CatalogStore",
    "merge_recursive",
    "CatalogLoader",
    "is_valid_filename",
    "LocaleDeriver",
    "LanguageResolver",
    "LanguageHint",
    "TranslationKey",
    "ClientExportBuilder",
    "Translator",
    "clean",
    "create_translator",
    "TranslationError",
    "InvalidLanguageCode",
    "LanguageFileNotFound",
    "MalformedLanguageFile",
    "MalformedClientExportKey",
    "MissingCatalogEntry",
]
