"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    LocalizationOptionsDep,
    RequestCultureDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_localization_options,
)

__all__ = [
    "SettingsDep",
    "LocalizationOptionsDep",
    "RequestCultureDep",
    "get_settings",
    "get_localization_options",
]
