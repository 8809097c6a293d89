"""Translation models for the catalog manager.

Defines the value types shared by the loader, the resolver and the client
export builder.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from infrastructure.i18n.errors import MalformedClientExportKey

# Nested catalog structure {namespace: {key: message}}
Catalog = Dict[str, Dict[str, str]]

# Joins namespace and key in fully-qualified keys, e.g. "General_Locale"
KEY_SEPARATOR = "_"

# Reserved entry holding the process locale, e.g. "en_US.UTF-8"
LOCALE_NAMESPACE = "General"
LOCALE_KEY = "Locale"


@dataclass(frozen=True)
class TranslationKey:
    """A fully-qualified translation key.

    Only the first separator splits, so the key part may itself contain
    underscores ("General_Locale", "Dashboard_Widget_Title").

    Attributes:
        namespace: Top-level namespace (e.g., "General", "Dashboard").
        message_key: Specific message identifier (e.g., "Locale").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}{KEY_SEPARATOR}{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a fully-qualified key.

        Args:
            key_string: Namespace and key joined by the separator.

        Returns:
            TranslationKey instance.

        Raises:
            MalformedClientExportKey: If the key has no separator or either
                part is empty.
        """
        if not isinstance(key_string, str):
            raise MalformedClientExportKey(key_string)
        namespace, sep, message_key = key_string.partition(KEY_SEPARATOR)
        if not sep or not namespace or not message_key:
            raise MalformedClientExportKey(key_string)
        return cls(namespace=namespace, message_key=message_key)


@dataclass
class LanguageHint:
    """Mutable language guess handed to ``get_language`` hook implementations.

    Implementations overwrite ``language`` to force a different language,
    e.g. one detected from an external identity system.

    Attributes:
        language: Current best-guess language code ("" when unknown).
        request_hint: The value the guess was seeded with, for reference.
    """

    language: str = ""
    request_hint: Optional[str] = None
