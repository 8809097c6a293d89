"""Translation plugin manager."""

from functools import lru_cache

import pluggy

from infrastructure import hookspecs
from infrastructure.logging import get_module_logger
from infrastructure.services.plugins.base import auto_discover_plugins

logger = get_module_logger()

PLUGIN_BASE_PATHS = ["modules"]


@lru_cache(maxsize=1)
def get_translation_plugin_manager() -> pluggy.PluginManager:
    """Get the translation plugin manager singleton.

    Returns:
        PluginManager configured with the translation hookspecs.
    """
    pm = pluggy.PluginManager(hookspecs.translations.PROJECT_NAME)
    pm.add_hookspecs(hookspecs.translations)

    logger.info("translation_plugin_manager_created")
    return pm


def discover_and_register_translation_plugins() -> pluggy.PluginManager:
    """Discover translation plugins and register them.

    Returns:
        The translation plugin manager, with every discovered plugin registered.
    """
    pm = get_translation_plugin_manager()
    auto_discover_plugins(pm, base_paths=PLUGIN_BASE_PATHS)

    logger.info("translation_plugins_discovered", plugin_count=len(pm.get_plugins()))
    return pm
