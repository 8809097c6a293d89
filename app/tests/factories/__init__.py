"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_french_catalog,
    make_translation_settings,
    write_language_file,
)

__all__ = [
    "make_catalog",
    "make_french_catalog",
    "make_translation_settings",
    "write_language_file",
]
