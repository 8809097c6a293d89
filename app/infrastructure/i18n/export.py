"""Client-side translation export.

Builds the script fragment that exposes a whitelisted subset of the catalog
to client code. Plugins declare the keys they need through the
``get_client_side_translation_keys`` hook.
"""

import json
from typing import Dict, List, Optional

import pluggy

from infrastructure.i18n.errors import MissingCatalogEntry
from infrastructure.i18n.models import TranslationKey
from infrastructure.i18n.store import CatalogStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

MISSING_KEY_MESSAGE = (
    "The string {key} was not loaded in javascript. Make sure it is added "
    "in the get_client_side_translation_keys hook."
)


def to_script_literal(value: object) -> str:
    """Serialize ``value`` as a literal that is safe inside a <script> element."""
    return (
        json.dumps(value, ensure_ascii=True, sort_keys=True)
        .replace("</", "<\\/")
        .replace("<!--", "<\\!--")
    )


class ClientExportBuilder:
    """Builds the client-side translation script.

    Attributes:
        store: Catalog store to read messages from.
        plugin_manager: Plugin manager whose hook supplies the key list.
        strict: Raise MissingCatalogEntry for keys absent from the catalog
            instead of leaving them out.
        table_name: Global client-side table the mapping is merged into.
        function_name: Client-side lookup function name.
    """

    def __init__(
        self,
        store: CatalogStore,
        plugin_manager: Optional[pluggy.PluginManager] = None,
        strict: bool = False,
        table_name: str = "app_translations",
        function_name: str = "_translate",
    ):
        self.store = store
        self.plugin_manager = plugin_manager
        self.strict = strict
        self.table_name = table_name
        self.function_name = function_name

    def get_client_side_translation_keys(self) -> List[str]:
        """Collect the client-side keys from plugins, without duplicates.

        Returns:
            Keys in first-declared order.
        """
        keys: List[str] = []
        if self.plugin_manager is not None:
            self.plugin_manager.hook.get_client_side_translation_keys(keys=keys)
        return list(dict.fromkeys(keys))

    def build_translations(self) -> Dict[str, str]:
        """Map each client-side key to its message.

        Keys missing from the catalog are left out (the client lookup then
        returns its placeholder) unless the builder is strict.

        Returns:
            Dict of fully-qualified key -> message.

        Raises:
            MalformedClientExportKey: If a key cannot be split into
                namespace and key.
            MissingCatalogEntry: In strict mode, if any key is absent.
        """
        keys = [TranslationKey.from_string(k) for k in self.get_client_side_translation_keys()]

        translations: Dict[str, str] = {}
        missing: List[str] = []
        with self.store.lock:
            for key in keys:
                message = self.store.get(key.namespace, key.message_key)
                if message is None:
                    missing.append(str(key))
                    continue
                translations[str(key)] = message

        if missing:
            logger.warning(
                "client_translations_missing",
                missing_keys=missing,
                language=self.store.loaded_language,
            )
            if self.strict:
                raise MissingCatalogEntry(missing)

        return translations

    def build_export_script(self) -> str:
        """Generate the client-side translation script.

        The script merges the exported mapping into the global table and
        defines a lookup function returning a placeholder message for
        identifiers that were never exported.

        Returns:
            Script source.
        """
        translations = self.build_translations()
        table = self.table_name
        missing = to_script_literal(MISSING_KEY_MESSAGE).split("{key}")

        script = "var translations = " + to_script_literal(translations) + ";"
        script += (
            f"\nif (typeof({table}) == 'undefined') {{ var {table} = new Object; }}"
            f"for (var i in translations) {{ {table}[i] = translations[i]; }} "
        )
        script += (
            f"function {self.function_name}(translationStringId) {{ "
            f"if (typeof({table}[translationStringId]) != 'undefined') "
            f"{{ return {table}[translationStringId]; }}"
            f"return {missing[0]}\" + translationStringId + \"{missing[1]};}}"
        )

        logger.info(
            "client_translation_script_built",
            key_count=len(translations),
            language=self.store.loaded_language,
        )
        return script
