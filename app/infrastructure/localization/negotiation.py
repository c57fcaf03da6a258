"""Per-request culture negotiation.

Providers are consulted in configured order. The first provider whose
candidates match a supported culture on either axis decides the request
culture; the unmatched axis falls back to the configured default. Later
providers are not consulted, even if they would match both axes.
"""

from starlette.requests import Request

from infrastructure.localization.matcher import match_any_culture
from infrastructure.localization.models import (
    LocalizationOptions,
    RequestCulture,
    RequestCultureFeature,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def negotiate(request: Request, options: LocalizationOptions) -> RequestCultureFeature:
    """Resolve the culture pair for a request.

    Args:
        request: The incoming request.
        options: Process-wide localization options.

    Returns:
        RequestCultureFeature with the resolved pair and the winning
        provider, or the default pair and no provider when nothing matched.
    """
    default = options.default_request_culture

    for provider in options.request_culture_providers:
        provider_result = provider.determine_provider_culture_result(request)
        if provider_result is None:
            continue

        culture = None
        ui_culture = None

        if options.supported_cultures is not None:
            culture = match_any_culture(
                provider_result.cultures,
                options.supported_cultures,
                options.fallback_to_parent_cultures,
            )

        if options.supported_ui_cultures is not None:
            ui_culture = match_any_culture(
                provider_result.ui_cultures,
                options.supported_ui_cultures,
                options.fallback_to_parent_ui_cultures,
            )

        if culture is None and ui_culture is None:
            logger.debug(
                "culture_provider_unmatched",
                provider=provider.provider_name,
                cultures=provider_result.cultures,
                ui_cultures=provider_result.ui_cultures,
            )
            continue

        request_culture = RequestCulture(
            culture if culture is not None else default.culture,
            ui_culture if ui_culture is not None else default.ui_culture,
        )
        logger.debug(
            "request_culture_negotiated",
            provider=provider.provider_name,
            culture=request_culture.culture,
            ui_culture=request_culture.ui_culture,
        )
        return RequestCultureFeature(request_culture, provider)

    logger.debug(
        "request_culture_defaulted",
        culture=default.culture,
        ui_culture=default.ui_culture,
    )
    return RequestCultureFeature(default, None)
