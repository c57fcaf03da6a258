"""Annotated dependencies for route signatures."""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.localization import (
    LocalizationOptions,
    RequestCultureFeature,
    get_request_culture,
)
from infrastructure.services.providers import get_localization_options, get_settings

SettingsDep = Annotated[Settings, Depends(get_settings)]

LocalizationOptionsDep = Annotated[
    LocalizationOptions, Depends(get_localization_options)
]

# Raises RequestCultureNotSetError outside RequestLocalizationMiddleware
RequestCultureDep = Annotated[RequestCultureFeature, Depends(get_request_culture)]

__all__ = [
    "SettingsDep",
    "LocalizationOptionsDep",
    "RequestCultureDep",
]
