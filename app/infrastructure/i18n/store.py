"""Process-wide translation catalog store.

Holds the nested {namespace: {key: message}} catalog plus the marker of the
language last fully merged. A single re-entrant lock guards every mutation;
multi-step sequences (a full reload) hold it for their whole duration.
"""

import copy
import threading
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, Optional

from infrastructure.i18n.models import Catalog
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def merge_recursive(target: Dict[str, Any], incoming: Mapping) -> Dict[str, Any]:
    """Deep-merge ``incoming`` into ``target`` in place.

    Where both sides hold a mapping the merge recurses; anywhere else the
    incoming value replaces the existing one, whatever its shape. Keys absent
    from ``incoming`` are left untouched. Incoming branches are copied so the
    caller's data is never aliased into the catalog.

    Args:
        target: Dict to merge into.
        incoming: Mapping to merge from.

    Returns:
        ``target``, for chaining.
    """
    for key, value in incoming.items():
        existing = target.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            merge_recursive(existing, value)
        elif isinstance(value, Mapping):
            target[key] = merge_recursive({}, value)
        else:
            target[key] = copy.deepcopy(value)
    return target


class CatalogStore:
    """Owned, lockable translation catalog.

    Attributes:
        lock: Re-entrant lock guarding the catalog and its markers.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._messages: Catalog = {}
        self._loaded_language: Optional[str] = None
        self._loaded_languages: set[str] = set()

    def clear(self) -> None:
        """Reset the catalog to empty and forget every loaded-language marker."""
        with self.lock:
            self._messages = {}
            self._loaded_language = None
            self._loaded_languages = set()
        logger.debug("catalog_cleared")

    def merge(self, incoming: Mapping) -> None:
        """Deep-merge a nested translation mapping into the catalog.

        Args:
            incoming: Mapping {namespace: {key: message}}.
        """
        with self.lock:
            merge_recursive(self._messages, incoming)
        logger.debug("catalog_merged", namespace_count=len(incoming))

    def get(self, namespace: str, key: str) -> Optional[str]:
        """Return the message for (namespace, key), or None if absent."""
        with self.lock:
            branch = self._messages.get(namespace)
            if not isinstance(branch, dict):
                return None
            return branch.get(key)

    def has(self, namespace: str, key: str) -> bool:
        with self.lock:
            branch = self._messages.get(namespace)
            return isinstance(branch, dict) and key in branch

    def namespace(self, name: str) -> Dict[str, Any]:
        """Return a copy of all messages in one namespace ({} if unknown)."""
        with self.lock:
            branch = self._messages.get(name)
            return dict(branch) if isinstance(branch, dict) else {}

    def snapshot(self) -> Catalog:
        """Return a deep copy of the whole catalog."""
        with self.lock:
            return copy.deepcopy(self._messages)

    def mark_loaded(self, language: str) -> None:
        """Record ``language`` as the language last fully merged."""
        with self.lock:
            self._loaded_language = language
            self._loaded_languages.add(language)

    @property
    def loaded_language(self) -> Optional[str]:
        """Language last fully merged since the last clear, if any."""
        with self.lock:
            return self._loaded_language

    @property
    def loaded_languages(self) -> FrozenSet[str]:
        """Every language fully merged since the last clear."""
        with self.lock:
            return frozenset(self._loaded_languages)

    @property
    def is_empty(self) -> bool:
        with self.lock:
            return not self._messages

    def __len__(self) -> int:
        with self.lock:
            return len(self._messages)

    def __contains__(self, namespace: object) -> bool:
        with self.lock:
            return namespace in self._messages
