"""Culture provider reading the culture from the query string."""

from typing import Optional

from starlette.requests import Request

from infrastructure.localization.models import ProviderCultureResult
from infrastructure.localization.providers import register_culture_provider
from infrastructure.localization.providers.base import RequestCultureProvider


@register_culture_provider("query_string")
class QueryStringRequestCultureProvider(RequestCultureProvider):
    """Determine the culture from ``?culture=en&ui-culture=vi``.

    When only one of the keys is present its value is used for both.
    """

    def __init__(
        self,
        query_string_key: str = "culture",
        ui_query_string_key: str = "ui-culture",
    ):
        self.query_string_key = query_string_key
        self.ui_query_string_key = ui_query_string_key

    def determine_provider_culture_result(
        self, request: Request
    ) -> Optional[ProviderCultureResult]:
        query = request.query_params
        culture = query.get(self.query_string_key) or None
        ui_culture = query.get(self.ui_query_string_key) or None

        if culture is None and ui_culture is None:
            return None

        if culture is None:
            culture = ui_culture
        elif ui_culture is None:
            ui_culture = culture

        return ProviderCultureResult([culture], [ui_culture])
