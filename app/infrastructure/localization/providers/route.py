"""Culture provider reading the culture from the request route."""

from typing import TYPE_CHECKING, Optional

from starlette.requests import Request

from infrastructure.localization.models import ProviderCultureResult
from infrastructure.localization.providers import register_culture_provider
from infrastructure.localization.providers.base import RequestCultureProvider

if TYPE_CHECKING:
    from infrastructure.configuration import LocalizationSettings


@register_culture_provider("route")
class RouteDataRequestCultureProvider(RequestCultureProvider):
    """Determine the culture from route data.

    Resolved path parameters (``culture`` / ``ui-culture``) are used when
    routing already ran. Otherwise the path segment at ``segment_index`` is
    read, so ``/en/Home/Index`` yields ``en`` for both culture and UI culture.
    """

    def __init__(
        self,
        route_data_key: str = "culture",
        ui_route_data_key: str = "ui-culture",
        segment_index: int = 0,
    ):
        self.route_data_key = route_data_key
        self.ui_route_data_key = ui_route_data_key
        self.segment_index = segment_index

    @classmethod
    def from_settings(
        cls, settings: "LocalizationSettings"
    ) -> "RouteDataRequestCultureProvider":
        return cls(segment_index=settings.route_segment_index)

    def _path_segment(self, request: Request) -> Optional[str]:
        segments = request.url.path.strip("/").split("/")
        if self.segment_index >= len(segments):
            return None
        return segments[self.segment_index] or None

    def determine_provider_culture_result(
        self, request: Request
    ) -> Optional[ProviderCultureResult]:
        path_params = request.path_params
        culture = path_params.get(self.route_data_key) or None
        ui_culture = path_params.get(self.ui_route_data_key) or None

        if culture is None and ui_culture is None:
            culture = self._path_segment(request)
            if culture is None:
                return None

        if culture is None:
            culture = ui_culture
        elif ui_culture is None:
            ui_culture = culture

        return ProviderCultureResult([culture], [ui_culture])
