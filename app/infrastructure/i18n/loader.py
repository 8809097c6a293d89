"""Language file loading.

Reads ``<code>.json`` language files from the translations directory and
merges them into the catalog store.
"""

import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

from infrastructure.i18n.errors import (
    InvalidLanguageCode,
    LanguageFileNotFound,
    MalformedLanguageFile,
)
from infrastructure.i18n.locale_deriver import LocaleDeriver
from infrastructure.i18n.store import CatalogStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LANGUAGE_FILE_SUFFIX = ".json"

# Starts with a letter or digit; no separators, no leading dot, no ".."
_VALID_FILENAME = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9_.\-]*")


def is_valid_filename(name: object) -> bool:
    """Check that ``name`` is safe to use as a file name component.

    Args:
        name: Candidate name, usually a language code.

    Returns:
        True if the name cannot escape its directory.
    """
    if not isinstance(name, str):
        return False
    if ".." in name:
        return False
    return _VALID_FILENAME.fullmatch(name) is not None


class CatalogLoader:
    """Loads language files into a CatalogStore.

    Attributes:
        store: Catalog store the files are merged into.
        translations_dir: Directory containing ``<code>.json`` files.
        default_language: Baseline language loaded by load_default().
        locale_deriver: Applies the catalog's locale after each load, if set.
    """

    def __init__(
        self,
        store: CatalogStore,
        translations_dir: Path,
        default_language: str = "en",
        locale_deriver: Optional[LocaleDeriver] = None,
    ):
        self.store = store
        self.translations_dir = Path(translations_dir)
        self.default_language = default_language
        self.locale_deriver = locale_deriver

        if not self.translations_dir.is_dir():
            logger.warning(
                "translations_dir_not_found",
                translations_dir=str(self.translations_dir),
            )

    def path_for(self, language: str) -> Path:
        """Return the language file path for a code.

        Raises:
            InvalidLanguageCode: If the code fails the filename-safety check.
        """
        if not is_valid_filename(language):
            logger.warning("invalid_language_code", language=repr(language))
            raise InvalidLanguageCode(language)
        return self.translations_dir / f"{language}{LANGUAGE_FILE_SUFFIX}"

    def read_language_file(self, language: str) -> Dict[str, Any]:
        """Read and parse a language file without touching the store.

        Args:
            language: Language code.

        Returns:
            Parsed {namespace: {key: message}} mapping.

        Raises:
            InvalidLanguageCode: If the code fails the filename-safety check.
            LanguageFileNotFound: If the file does not exist or is unreadable.
            MalformedLanguageFile: If the file is not a JSON object.
        """
        path = self.path_for(language)
        if not path.is_file() or not os.access(path, os.R_OK):
            logger.warning(
                "language_file_not_found", language=language, path=str(path)
            )
            raise LanguageFileNotFound(language, path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("language_file_parse_error", path=str(path), error=str(e))
            raise MalformedLanguageFile(language, path, str(e)) from e

        if not isinstance(data, dict):
            raise MalformedLanguageFile(
                language, path, f"expected an object, got {type(data).__name__}"
            )
        return data

    def load_language_file(self, language: str) -> None:
        """Load a language file into the store and make it the active language.

        Merges the file, re-applies the locale and records ``language`` as
        the loaded-language marker.

        Args:
            language: Language code, e.g. "fr".

        Raises:
            InvalidLanguageCode: If the code fails the filename-safety check.
            LanguageFileNotFound: If the file does not exist or is unreadable.
            MalformedLanguageFile: If the file is not a JSON object.
        """
        translations = self.read_language_file(language)
        with self.store.lock:
            self.store.merge(translations)
            if self.locale_deriver is not None:
                self.locale_deriver.apply(self.store)
            self.store.mark_loaded(language)

        logger.info(
            "language_file_loaded",
            language=language,
            namespace_count=len(translations),
        )

    def load_default(self) -> None:
        """Load the baseline language."""
        self.load_language_file(self.default_language)

    def unload_all(self) -> None:
        """Clear the store, including the loaded-language marker."""
        self.store.clear()
        logger.info("translations_unloaded")

    def load_if_changed(self, language: str) -> bool:
        """Load ``language`` unless it is already the active language.

        Args:
            language: Language code.

        Returns:
            True if the file was loaded, False if the call was a no-op.
        """
        with self.store.lock:
            if self.store.loaded_language == language:
                logger.debug("language_already_loaded", language=language)
                return False
            self.load_language_file(language)
            return True
