"""Dashboard translation files."""

import json
from pathlib import Path

from infrastructure.i18n import CatalogStore, is_valid_filename
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LANG_DIR = Path(__file__).resolve().parent / "lang"
FALLBACK_LANGUAGE = "en"

CLIENT_SIDE_KEYS = [
    "General_Loading",
    "General_Close",
    "Dashboard_AddWidget",
    "Dashboard_LoadingWidget",
    "Dashboard_WidgetNotFound",
]


def load(language: str, store: CatalogStore) -> None:
    """Merge ``lang/<language>.json`` into the store.

    The English file is merged when the plugin has no file for the language,
    so the namespace is always present.
    """
    if not is_valid_filename(language) or not (LANG_DIR / f"{language}.json").is_file():
        logger.debug("dashboard_language_fallback", language=language)
        language = FALLBACK_LANGUAGE

    with open(LANG_DIR / f"{language}.json", "r", encoding="utf-8") as f:
        store.merge(json.load(f))
