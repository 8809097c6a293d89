import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection, however
# pytest was invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pluggy
import pytest

from infrastructure import hookspecs
from infrastructure.i18n import CatalogStore, create_translator
from tests.factories.i18n import (
    make_catalog,
    make_french_catalog,
    make_translation_settings,
    write_language_file,
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no I/O beyond tmp_path")


@pytest.fixture
def plugin_manager():
    """Fresh plugin manager with the translation hookspecs and no plugins."""
    pm = pluggy.PluginManager("translate")
    pm.add_hookspecs(hookspecs.translations)
    return pm


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def translations_dir(tmp_path):
    """Directory with en.json (full), fr.json (partial) and broken.json.

    Returns a directory structure like:
    - en.json
    - fr.json
    - broken.json
    """
    directory = tmp_path / "lang"
    directory.mkdir()
    write_language_file(directory, "en", make_catalog())
    write_language_file(directory, "fr", make_french_catalog())
    (directory / "broken.json").write_text("{not json", encoding="utf-8")
    return directory


@pytest.fixture
def translation_settings(translations_dir):
    return make_translation_settings(translations_dir)


@pytest.fixture
def setlocale_calls():
    """Recording stand-in for locale.setlocale that accepts every locale."""
    calls = []

    def _setlocale(category, value=None):
        calls.append((category, value))
        return value or "C"

    _setlocale.calls = calls
    return _setlocale


@pytest.fixture
def translator(translation_settings, plugin_manager):
    """Translator over the temporary translations directory, nothing loaded."""
    return create_translator(translation_settings, plugin_manager=plugin_manager)
