"""Service wiring: plugin managers and FastAPI dependency providers."""

from infrastructure.services.dependencies import SettingsDep, TranslatorDep
from infrastructure.services.plugins import (
    discover_and_register_translation_plugins,
    get_translation_plugin_manager,
    hookimpl,
)
from infrastructure.services.providers import get_settings, get_translator

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "discover_and_register_translation_plugins",
    "get_settings",
    "get_translation_plugin_manager",
    "get_translator",
    "hookimpl",
]
