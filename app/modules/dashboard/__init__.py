"""Dashboard module - translation plugin.

Contributes the ``Dashboard`` namespace from ``lang/<code>.json`` and
declares the strings the dashboard's client code needs.
"""

from infrastructure.services import hookimpl
from modules.dashboard import translations


@hookimpl
def load_plugin_translations(language, store):
    """Merge the dashboard translations for ``language``."""
    translations.load(language, store)


@hookimpl
def get_client_side_translation_keys(keys):
    """Request the dashboard strings used by client code."""
    keys.extend(translations.CLIENT_SIDE_KEYS)
