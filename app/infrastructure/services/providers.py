"""Process-wide providers for FastAPI dependency injection.

Both providers are cached, so a process has exactly one Settings object and
one Translator (and so one catalog store). Tests swap them through
``app.dependency_overrides`` or reset them with ``cache_clear()``.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import Translator, create_translator
from infrastructure.services.plugins import discover_and_register_translation_plugins


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """Build the translator on first use, discovering translation plugins.

    Nothing is loaded yet; the server lifespan loads the default language.
    """
    plugin_manager = discover_and_register_translation_plugins()
    return create_translator(get_settings().translations, plugin_manager=plugin_manager)
