"""Shared building blocks of the culture negotiation service.

Subpackages: configuration (settings groups), logging (structlog setup and
request context), localization (providers, matching, negotiation) and
services (singletons and FastAPI dependencies).
"""

# Configuration
from infrastructure.configuration import Settings

# Logging
from infrastructure.logging import configure_logging, get_module_logger

# Dependency Injection Services
from infrastructure.services import (
    SettingsDep,
    LocalizationOptionsDep,
    RequestCultureDep,
    get_settings,
    get_localization_options,
)

__all__ = [
    # Configuration
    "Settings",
    # Logging
    "configure_logging",
    "get_module_logger",
    # Dependency Injection Services
    "SettingsDep",
    "LocalizationOptionsDep",
    "RequestCultureDep",
    "get_settings",
    "get_localization_options",
]
