"""Tests for infrastructure.i18n.loader module."""

import locale

import pytest

from infrastructure.i18n import (
    CatalogLoader,
    InvalidLanguageCode,
    LanguageFileNotFound,
    is_valid_filename,
)
from infrastructure.i18n.errors import MalformedLanguageFile
from tests.factories.i18n import write_language_file


@pytest.mark.unit
class TestIsValidFilename:
    """Tests for the filename-safety check."""

    @pytest.mark.parametrize("name", ["en", "fr", "pt-br", "zh_CN", "en.v2", "zz"])
    def test_accepts_plain_codes(self, name):
        assert is_valid_filename(name) is True

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "..",
            "../en",
            "en/../fr",
            "en/fr",
            "..\\en",
            ".hidden",
            "-en",
            "en..",
            "en\x00",
            "e n",
            "/etc/passwd",
            None,
            12,
        ],
    )
    def test_rejects_unsafe_names(self, name):
        assert is_valid_filename(name) is False


@pytest.mark.unit
class TestCatalogLoader:
    """Tests for CatalogLoader."""

    def test_load_language_file_merges_and_marks(self, loader, store):
        loader.load_language_file("en")

        assert store.get("General", "Loading") == "Loading..."
        assert store.loaded_language == "en"

    def test_path_traversal_rejected_even_if_file_exists(self, loader, translations_dir, store):
        """A traversal code fails validation before the filesystem is consulted."""
        write_language_file(translations_dir.parent, "secret", {"Secret": {"k": "v"}})

        with pytest.raises(InvalidLanguageCode) as exc_info:
            loader.load_language_file("../secret")

        assert exc_info.value.language == "../secret"
        assert store.is_empty
        assert store.loaded_language is None

    def test_unknown_code_raises_not_found(self, loader, store):
        with pytest.raises(LanguageFileNotFound) as exc_info:
            loader.load_language_file("zz")

        assert exc_info.value.language == "zz"
        assert exc_info.value.path.name == "zz.json"
        assert store.is_empty

    def test_not_found_is_a_lookup_error(self, loader):
        with pytest.raises(LookupError):
            loader.load_language_file("zz")

    def test_directory_named_like_language_is_not_a_file(self, loader, translations_dir):
        (translations_dir / "dir.json").mkdir()
        with pytest.raises(LanguageFileNotFound):
            loader.load_language_file("dir")

    def test_malformed_json_raises(self, loader, store):
        with pytest.raises(MalformedLanguageFile) as exc_info:
            loader.load_language_file("broken")

        assert exc_info.value.language == "broken"
        assert store.is_empty

    def test_non_object_json_raises(self, loader, translations_dir):
        write_language_file(translations_dir, "list", ["not", "a", "catalog"])
        with pytest.raises(MalformedLanguageFile):
            loader.load_language_file("list")

    def test_reads_utf8(self, loader, translations_dir, store):
        write_language_file(translations_dir, "de", {"General": {"Close": "Schließen"}})
        loader.load_language_file("de")
        assert store.get("General", "Close") == "Schließen"

    def test_requested_language_overrides_default(self, loader, store):
        loader.load_default()
        loader.load_language_file("fr")

        assert store.get("General", "Loading") == "Chargement..."
        # Keys missing from the partial French file keep the baseline value
        assert store.get("General", "Ok") == "Ok"
        assert store.get("Login", "LogIn") == "Sign in"
        assert store.loaded_language == "fr"
        assert store.loaded_languages == frozenset({"en", "fr"})

    def test_load_default_uses_configured_language(self, store, translations_dir):
        loader = CatalogLoader(store, translations_dir, default_language="fr")
        loader.load_default()
        assert store.loaded_language == "fr"

    def test_unload_all_clears_store_and_marker(self, loader, store):
        loader.load_default()
        loader.unload_all()

        assert store.is_empty
        assert store.loaded_language is None

    def test_load_if_changed_skips_active_language(self, loader, store):
        assert loader.load_if_changed("en") is True
        store.merge({"General": {"Loading": "patched"}})

        assert loader.load_if_changed("en") is False
        assert store.get("General", "Loading") == "patched"

    def test_load_if_changed_loads_other_language(self, loader, store):
        loader.load_if_changed("en")
        assert loader.load_if_changed("fr") is True
        assert store.get("General", "Loading") == "Chargement..."

    def test_load_if_changed_reloads_after_unload(self, loader, store):
        """A cleared store never short-circuits on a stale marker."""
        loader.load_if_changed("en")
        loader.unload_all()

        assert loader.load_if_changed("en") is True
        assert store.get("General", "Loading") == "Loading..."

    def test_load_applies_locale_from_catalog(self, recording_loader, setlocale_calls):
        recording_loader.load_language_file("fr")

        assert setlocale_calls.calls[0] == (locale.LC_ALL, "fr_FR.UTF-8")
        assert setlocale_calls.calls[-1] == (locale.LC_CTYPE, "")

    def test_failed_load_does_not_touch_locale(self, recording_loader, setlocale_calls):
        with pytest.raises(LanguageFileNotFound):
            recording_loader.load_language_file("zz")
        assert setlocale_calls.calls == []

    def test_missing_translations_dir_is_tolerated_until_load(self, store, tmp_path):
        loader = CatalogLoader(store, tmp_path / "missing")
        with pytest.raises(LanguageFileNotFound):
            loader.load_default()
