"""Translation plugins: the ``hookimpl`` marker and the plugin manager.

Plugins decorate functions with ``hookimpl`` in a package under ``modules``;
discovery registers the package as a whole.
"""

import pluggy

from infrastructure.hookspecs.translations import PROJECT_NAME
from infrastructure.services.plugins.translations import (
    discover_and_register_translation_plugins,
    get_translation_plugin_manager,
)

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

__all__ = [
    "discover_and_register_translation_plugins",
    "get_translation_plugin_manager",
    "hookimpl",
]
