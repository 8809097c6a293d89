"""Hook specifications for translation catalog extension points."""

from typing import TYPE_CHECKING, List

import pluggy

if TYPE_CHECKING:
    from infrastructure.i18n.models import LanguageHint
    from infrastructure.i18n.store import CatalogStore

PROJECT_NAME = "translate"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)


@hookspec
def get_language(hint: "LanguageHint") -> None:
    """Identify the language code for the current user.

    Called once per execution context, before any catalog is loaded. The
    hint is seeded with the language requested in the URL (or "");
    implementations may overwrite ``hint.language``, for instance with a
    language detected from an external identity system.

    Args:
        hint: Mutable language guess.
    """


@hookspec
def load_plugin_translations(language: str, store: "CatalogStore") -> None:
    """Merge plugin-provided translations for ``language`` into the store.

    Called at the end of every full reload, after the default and the
    requested core languages are merged. Implementations call
    ``store.merge({...})`` with their own namespaces.

    Args:
        language: Language code that was just loaded.
        store: Catalog store to merge into.
    """


@hookspec
def get_client_side_translation_keys(keys: List[str]) -> None:
    """Declare which translations client-side code needs.

    Implementations append fully-qualified keys that include the namespace,
    for example::

        @hookimpl
        def get_client_side_translation_keys(keys):
            keys.append("Dashboard_LoadingWidget")

    Args:
        keys: Growable list of fully-qualified keys.
    """
