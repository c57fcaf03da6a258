"""Factory functions for creating request localization components."""

from infrastructure.configuration import LocalizationSettings
from infrastructure.localization.models import LocalizationOptions, RequestCulture
from infrastructure.localization.providers import create_culture_providers
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def build_localization_options(settings: LocalizationSettings) -> LocalizationOptions:
    """Create LocalizationOptions from settings.

    Args:
        settings: Localization feature settings.

    Returns:
        LocalizationOptions: Immutable options with providers instantiated
        in configured order.

    Raises:
        ValueError: If a provider name is unknown or a supported list holds
            duplicates.
    """
    providers = create_culture_providers(settings.request_culture_providers, settings)

    options = LocalizationOptions(
        default_request_culture=RequestCulture(
            settings.default_request_culture,
            settings.resolved_default_ui_culture,
        ),
        supported_cultures=settings.supported_cultures,
        supported_ui_cultures=settings.supported_ui_cultures,
        fallback_to_parent_cultures=settings.fallback_to_parent_cultures,
        fallback_to_parent_ui_cultures=settings.fallback_to_parent_ui_cultures,
        apply_current_culture_to_response_headers=(
            settings.apply_current_culture_to_response_headers
        ),
        request_culture_providers=tuple(providers),
    )

    logger.info(
        "localization_options_built",
        default_culture=options.default_request_culture.culture,
        default_ui_culture=options.default_request_culture.ui_culture,
        supported_cultures=options.supported_cultures,
        supported_ui_cultures=options.supported_ui_cultures,
        providers=options.provider_names,
    )
    return options
