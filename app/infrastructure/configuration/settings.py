"""Application settings aggregate."""

from pydantic import Field
from pydantic_settings import BaseSettings

from infrastructure.configuration.base import ENV_SETTINGS_CONFIG
from infrastructure.configuration.features import LocalizationSettings
from infrastructure.configuration.infrastructure import ServerSettings


class Settings(BaseSettings):
    """Top-level settings plus one attribute per settings group.

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Root log level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Deployed commit, reported by /version and in logs

    Each group reads its own variables, see ``LocalizationSettings`` and
    ``ServerSettings``. Groups can be passed in explicitly:

        Settings(localization=LocalizationSettings(DEFAULT_REQUEST_CULTURE="en"))
    """

    model_config = ENV_SETTINGS_CONFIG

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    localization: LocalizationSettings = Field(default_factory=LocalizationSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    @property
    def is_production(self) -> bool:
        """Production deployments run without an environment prefix."""
        return not self.PREFIX
