"""Feature settings sections."""

from infrastructure.configuration.features.translations import TranslationSettings

__all__ = [
    "TranslationSettings",
]
