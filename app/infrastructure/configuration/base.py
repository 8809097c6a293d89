"""Base class for feature settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureSettings(BaseSettings):
    """Settings section read straight from the environment.

    Fields declare their variable name as an alias; ``populate_by_name``
    lets code and tests pass the field name instead.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
