"""Top-level settings for the translation catalog service."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.features import TranslationSettings


class Settings(BaseSettings):
    """Service settings with one nested section per feature.

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (default: INFO)
        GIT_SHA: Deployed commit, stamped on every log entry
        HOST: Interface the HTTP server binds to (default: 0.0.0.0)
        PORT: HTTP server port (default: 8000)

    Feature sections read their own variables, see TranslationSettings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"
    HOST: str = "0.0.0.0"  # nosec - bind all interfaces in container
    PORT: int = Field(default=8000, ge=1, le=65535)

    translations: TranslationSettings = Field(default_factory=TranslationSettings)

    @property
    def is_production(self) -> bool:
        return not self.PREFIX
