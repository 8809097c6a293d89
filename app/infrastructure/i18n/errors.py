"""Custom exceptions for the translation catalog.

All catalog errors inherit from TranslationError so callers can handle
them in one place.
"""

from pathlib import Path
from typing import Iterable, Optional


class TranslationError(Exception):
    """Base exception for all translation catalog errors.

    Example:
        try:
            translator.reload_language("fr")
        except TranslationError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class InvalidLanguageCode(TranslationError, ValueError):
    """Raised when a language code fails the filename-safety check.

    Example:
        >>> loader.load_language_file("../etc/passwd")
        Traceback (most recent call last):
        ...
        InvalidLanguageCode: Invalid language code: '../etc/passwd'
    """

    def __init__(self, language: object):
        self.language = language
        super().__init__(f"Invalid language code: {language!r}")


class LanguageFileNotFound(TranslationError, LookupError):
    """Raised when no readable language file exists for a valid code."""

    def __init__(self, language: str, path: Optional[Path] = None):
        self.language = language
        self.path = path
        super().__init__(f"Language file not found for language '{language}'")


class MalformedLanguageFile(TranslationError, ValueError):
    """Raised when a language file is not a JSON object of namespaces."""

    def __init__(self, language: str, path: Path, reason: str):
        self.language = language
        self.path = path
        super().__init__(f"Malformed language file {path}: {reason}")


class MalformedClientExportKey(TranslationError, ValueError):
    """Raised when a client-side key cannot be split into namespace and key."""

    def __init__(self, key: object):
        self.key = key
        super().__init__(
            f"Client-side translation key must be in format 'Namespace_key': {key!r}"
        )


class MissingCatalogEntry(TranslationError, KeyError):
    """Raised when fully-qualified keys have no entry in the loaded catalog."""

    def __init__(self, keys: Iterable[str]):
        self.keys = list(keys)
        super().__init__(f"Translation not found for keys: {', '.join(self.keys)}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
