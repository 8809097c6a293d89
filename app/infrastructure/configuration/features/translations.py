"""Translation catalog feature settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class TranslationSettings(FeatureSettings):
    """Translation catalog configuration.

    Environment Variables:
        TRANSLATIONS_DIR: Directory holding the ``<code>.json`` language files
            (default: auto-discovered ``app/locales``)
        DEFAULT_LANGUAGE: Baseline language loaded before every requested
            language (default: en)
        LANGUAGE_REQUEST_PARAM: Query parameter used to seed the language
            guess (default: language)
        TRANSLATIONS_APPLY_LOCALE: Apply the ``General.Locale`` entry as the
            process locale after each load (default: True)
        TRANSLATIONS_STRICT_CLIENT_EXPORT: Raise instead of skipping client
            keys that are missing from the catalog (default: False)
        CLIENT_TRANSLATIONS_OBJECT: Name of the global client-side table
        CLIENT_TRANSLATE_FUNCTION: Name of the client-side lookup function

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default = settings.translations.DEFAULT_LANGUAGE
        ```
    """

    TRANSLATIONS_DIR: Optional[Path] = Field(default=None, alias="TRANSLATIONS_DIR")
    DEFAULT_LANGUAGE: str = Field(default="en", alias="DEFAULT_LANGUAGE")
    LANGUAGE_REQUEST_PARAM: str = Field(
        default="language", alias="LANGUAGE_REQUEST_PARAM"
    )
    APPLY_LOCALE: bool = Field(default=True, alias="TRANSLATIONS_APPLY_LOCALE")
    STRICT_CLIENT_EXPORT: bool = Field(
        default=False,
        alias="TRANSLATIONS_STRICT_CLIENT_EXPORT",
        description="Raise MissingCatalogEntry for unknown client-side keys",
    )
    CLIENT_TRANSLATIONS_OBJECT: str = Field(
        default="app_translations", alias="CLIENT_TRANSLATIONS_OBJECT"
    )
    CLIENT_TRANSLATE_FUNCTION: str = Field(
        default="_translate", alias="CLIENT_TRANSLATE_FUNCTION"
    )

    @field_validator("CLIENT_TRANSLATIONS_OBJECT", "CLIENT_TRANSLATE_FUNCTION")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        """Client-side names are emitted verbatim into the script."""
        if not v.isidentifier():
            raise ValueError(f"Not a valid script identifier: {v}")
        return v

    @property
    def translations_dir(self) -> Path:
        """Configured language directory, or ``app/locales`` when unset."""
        if self.TRANSLATIONS_DIR is not None:
            return Path(self.TRANSLATIONS_DIR)
        # this file is at .../app/infrastructure/configuration/features/translations.py
        return Path(__file__).resolve().parents[3] / "locales"
