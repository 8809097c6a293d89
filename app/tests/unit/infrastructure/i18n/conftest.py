"""Feature-level fixtures for i18n system tests."""

import pytest

from infrastructure.i18n import CatalogLoader, LocaleDeriver


@pytest.fixture
def loader(store, translations_dir):
    """CatalogLoader over the temporary directory, locale application disabled."""
    return CatalogLoader(
        store=store,
        translations_dir=translations_dir,
        default_language="en",
        locale_deriver=LocaleDeriver(enabled=False),
    )


@pytest.fixture
def recording_loader(store, translations_dir, setlocale_calls):
    """CatalogLoader whose locale deriver records setlocale calls."""
    return CatalogLoader(
        store=store,
        translations_dir=translations_dir,
        locale_deriver=LocaleDeriver(setlocale=setlocale_calls),
    )
