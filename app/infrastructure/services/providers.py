"""Process-wide singletons behind the FastAPI dependencies."""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.localization import LocalizationOptions, build_localization_options


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once from the environment and ``.env``.

    Routes take ``SettingsDep`` instead of calling this, so tests can
    override it.
    """
    return Settings()


@lru_cache
def get_localization_options() -> LocalizationOptions:
    """Immutable options built from ``get_settings().localization``.

    Invalid configuration raises on the first call. The lifespan makes that
    call at startup.
    """
    return build_localization_options(get_settings().localization)
