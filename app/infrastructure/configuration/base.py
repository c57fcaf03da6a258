"""Base classes for the settings groups.

Every group reads the same process environment and ``.env`` file. Names
are case sensitive and unknown variables are ignored, so one environment
can feed all groups.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class FeatureSettings(BaseSettings):
    """Settings of a request-facing feature (request localization)."""

    model_config = ENV_SETTINGS_CONFIG


class InfrastructureSettings(BaseSettings):
    """Settings of the hosting process (HTTP server, CORS, rate limits)."""

    model_config = ENV_SETTINGS_CONFIG
