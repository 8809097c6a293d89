"""Configuration (pydantic-settings).

``settings`` is read once from the environment and ``.env`` at import time.
Code that runs per request should prefer ``infrastructure.services.get_settings``
so tests can override it.
"""

from infrastructure.configuration.features import TranslationSettings
from infrastructure.configuration.settings import Settings

settings = Settings()

__all__ = ["settings", "Settings", "TranslationSettings"]
