from fastapi import APIRouter

from api.v1.schemas import LocalizationOptionsResponse, RequestCultureResponse
from infrastructure.localization import get_current_culture, get_current_ui_culture
from infrastructure.services import LocalizationOptionsDep, RequestCultureDep

router = APIRouter(prefix="/localization", tags=["Localization"])


@router.get("/culture", response_model=RequestCultureResponse)
def get_request_culture(request_culture: RequestCultureDep) -> RequestCultureResponse:
    """Return the culture negotiated for this request."""
    resolved = request_culture.request_culture
    return RequestCultureResponse(
        culture=resolved.culture,
        ui_culture=resolved.ui_culture,
        provider=request_culture.provider_name,
        current_culture=get_current_culture(),
        current_ui_culture=get_current_ui_culture(),
    )


@router.get("/options", response_model=LocalizationOptionsResponse)
def get_localization_options(
    options: LocalizationOptionsDep,
) -> LocalizationOptionsResponse:
    """Return the configured culture catalog."""

    def _as_list(names):
        return None if names is None else list(names)

    return LocalizationOptionsResponse(
        default_culture=options.default_request_culture.culture,
        default_ui_culture=options.default_request_culture.ui_culture,
        supported_cultures=_as_list(options.supported_cultures),
        supported_ui_cultures=_as_list(options.supported_ui_cultures),
        fallback_to_parent_cultures=options.fallback_to_parent_cultures,
        fallback_to_parent_ui_cultures=options.fallback_to_parent_ui_cultures,
        apply_current_culture_to_response_headers=(
            options.apply_current_culture_to_response_headers
        ),
        providers=list(options.provider_names),
    )
