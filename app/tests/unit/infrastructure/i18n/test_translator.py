"""Tests for infrastructure.i18n.translator module."""

import json
import re
import threading

import pytest

from infrastructure.i18n import (
    InvalidLanguageCode,
    LanguageFileNotFound,
    MissingCatalogEntry,
    Translator,
    clean,
    create_translator,
)
from tests.factories.i18n import (
    ClientKeysPlugin,
    LanguageOverridePlugin,
    PluginTranslations,
    make_translation_settings,
)


def _exported_mapping(script):
    return json.loads(re.match(r"var translations = (\{.*?\});\n", script).group(1))


@pytest.mark.unit
class TestClean:
    def test_trims_and_decodes_entities(self):
        assert clean("  Tom &amp; Jerry &quot;quoted&quot; &#039;x&#039; ") == (
            "Tom & Jerry \"quoted\" 'x'"
        )


@pytest.mark.unit
class TestTranslatorReload:
    """Tests for Translator.reload_language()."""

    def test_factory_builds_unloaded_translator(self, translator):
        assert isinstance(translator, Translator)
        assert translator.store.is_empty
        assert translator.language_loaded is None
        assert translator.language_default == "en"

    def test_components_share_one_store(self, translator):
        assert translator.loader.store is translator.store
        assert translator.exporter.store is translator.store

    def test_reload_requested_language_over_default(self, translator):
        loaded = translator.reload_language("fr")

        assert loaded == "fr"
        assert translator.language_loaded == "fr"
        assert translator.store.get("General", "Loading") == "Chargement..."
        # Baseline fills what the French file lacks
        assert translator.store.get("Login", "LogIn") == "Sign in"

    def test_reload_clears_previous_language(self, translator, translations_dir):
        (translations_dir / "de.json").write_text(
            json.dumps({"German": {"Only": "Nur"}}), encoding="utf-8"
        )
        translator.reload_language("de")
        translator.reload_language("fr")

        assert "German" not in translator.store

    def test_reload_calls_plugin_translations(self, translator, plugin_manager):
        plugin = PluginTranslations(
            {
                "en": {"Plugin": {"Hello": "Hello"}},
                "fr": {"Plugin": {"Hello": "Bonjour"}},
            }
        )
        plugin_manager.register(plugin)

        translator.reload_language("fr")

        assert plugin.loaded == ["fr"]
        assert translator.store.get("Plugin", "Hello") == "Bonjour"

    def test_plugin_translations_merge_after_core(self, translator, plugin_manager):
        plugin_manager.register(
            PluginTranslations({"fr": {"General": {"Close": "Fermer (plugin)"}}})
        )
        translator.reload_language("fr")
        assert translator.store.get("General", "Close") == "Fermer (plugin)"
        assert translator.store.get("General", "Loading") == "Chargement..."

    def test_empty_language_uses_resolver(self, translator, plugin_manager):
        plugin_manager.register(LanguageOverridePlugin("fr"))
        assert translator.reload_language() == "fr"
        assert translator.language_loaded == "fr"

    def test_empty_resolution_falls_back_to_default(self, translator):
        assert translator.reload_language("") == "en"
        assert translator.language_loaded == "en"

    def test_missing_requested_language_aborts_after_default(self, translator, plugin_manager):
        """No rollback: the default language stays loaded, plugins never run."""
        plugin = PluginTranslations({"en": {"Plugin": {"Hello": "Hello"}}})
        plugin_manager.register(plugin)

        with pytest.raises(LanguageFileNotFound):
            translator.reload_language("zz")

        assert translator.language_loaded == "en"
        assert translator.store.get("General", "Loading") == "Loading..."
        assert plugin.loaded == []

    def test_missing_default_language_aborts_on_empty_store(self, translations_dir, plugin_manager):
        settings = make_translation_settings(translations_dir, default_language="xx")
        translator = create_translator(settings, plugin_manager=plugin_manager)

        with pytest.raises(LanguageFileNotFound) as exc_info:
            translator.reload_language("fr")

        assert exc_info.value.language == "xx"
        assert translator.store.is_empty

    def test_invalid_code_aborts(self, translator):
        with pytest.raises(InvalidLanguageCode):
            translator.reload_language("../fr")
        assert translator.language_loaded == "en"

    def test_reload_blocks_concurrent_readers(self, translator):
        """Readers waiting on the store lock see a completely reloaded catalog."""
        translator.reload_language("en")
        seen = []

        with translator.store.lock:
            reader = threading.Thread(
                target=lambda: seen.append(translator.store.get("General", "Loading"))
            )
            translator.loader.unload_all()
            reader.start()
            translator.loader.load_default()
            translator.loader.load_language_file("fr")
        reader.join()

        assert seen == ["Chargement..."]


@pytest.mark.unit
class TestTranslatorLoadCore:
    """Tests for Translator.load_core_translation()."""

    def test_loads_once(self, translator):
        translator.load_core_translation("fr")
        translator.store.merge({"General": {"Loading": "patched"}})

        translator.load_core_translation("fr")

        assert translator.store.get("General", "Loading") == "patched"

    def test_loads_when_language_changes(self, translator):
        translator.load_core_translation("en")
        translator.load_core_translation("fr")
        assert translator.store.get("General", "Loading") == "Chargement..."

    def test_resolves_when_empty(self, translator, plugin_manager):
        plugin_manager.register(LanguageOverridePlugin("fr"))
        assert translator.load_core_translation() == "fr"


@pytest.mark.unit
class TestTranslatorLookup:
    """Tests for Translator lookups."""

    @pytest.fixture
    def loaded(self, translator):
        translator.reload_language("en")
        translator.merge_translations({"Plugin": {"Welcome": "Welcome %s, you have %s messages"}})
        return translator

    def test_get_returns_message(self, loaded):
        assert loaded.get("General", "Close") == "Close"

    def test_get_missing_raises(self, loaded):
        with pytest.raises(MissingCatalogEntry) as exc_info:
            loaded.get("General", "Unknown")
        assert exc_info.value.keys == ["General_Unknown"]

    def test_translate_fully_qualified_key(self, loaded):
        assert loaded.translate("General_Close") == "Close"

    def test_translate_with_arguments(self, loaded):
        assert loaded.translate("Plugin_Welcome", "Ana", 3) == "Welcome Ana, you have 3 messages"

    def test_translate_with_wrong_argument_count_returns_message(self, loaded):
        assert loaded.translate("Plugin_Welcome", "Ana") == "Welcome %s, you have %s messages"

    @pytest.mark.parametrize("key", ["General_Unknown", "Unknown", "General_"])
    def test_translate_unknown_returns_key(self, loaded, key):
        assert loaded.translate(key) == key


@pytest.mark.unit
class TestTranslatorExport:
    """End-to-end reload then export."""

    def test_requested_language_wins_in_export(self, translator, plugin_manager):
        plugin_manager.register(ClientKeysPlugin(["General_Loading", "Login_LogIn"]))

        translator.reload_language("fr")
        script = translator.build_export_script()

        assert _exported_mapping(script) == {
            "General_Loading": "Chargement...",
            "Login_LogIn": "Sign in",
        }

    def test_export_language_reloads_and_exports(self, translator, plugin_manager):
        plugin_manager.register(ClientKeysPlugin(["General_Close"]))

        language, script = translator.export_language("fr")

        assert language == "fr"
        assert _exported_mapping(script) == {"General_Close": "Fermer"}

    def test_strict_export_from_settings(self, translations_dir, plugin_manager):
        settings = make_translation_settings(translations_dir, strict_client_export=True)
        translator = create_translator(settings, plugin_manager=plugin_manager)
        plugin_manager.register(ClientKeysPlugin(["General_Unknown"]))

        translator.reload_language("en")

        with pytest.raises(MissingCatalogEntry):
            translator.build_export_script()
