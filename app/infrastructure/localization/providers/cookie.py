"""Culture provider reading the culture from a cookie.

The cookie value has the form ``c=<culture>|uic=<ui culture>``.
"""

from typing import TYPE_CHECKING, Optional

from starlette.requests import Request

from infrastructure.localization.models import ProviderCultureResult, RequestCulture
from infrastructure.localization.providers import register_culture_provider
from infrastructure.localization.providers.base import RequestCultureProvider

if TYPE_CHECKING:
    from infrastructure.configuration import LocalizationSettings

DEFAULT_COOKIE_NAME = "request-culture"

_CULTURE_PREFIX = "c="
_UI_CULTURE_PREFIX = "uic="
_SEPARATOR = "|"


def make_cookie_value(request_culture: RequestCulture) -> str:
    """Serialize a culture pair into the cookie format."""
    return (
        f"{_CULTURE_PREFIX}{request_culture.culture}"
        f"{_SEPARATOR}{_UI_CULTURE_PREFIX}{request_culture.ui_culture}"
    )


def parse_cookie_value(value: Optional[str]) -> Optional[ProviderCultureResult]:
    """Parse a cookie value, returning None when it is malformed or empty."""
    if not value:
        return None

    parts = value.split(_SEPARATOR)
    if len(parts) != 2:
        return None

    culture_part, ui_culture_part = parts
    if not culture_part.startswith(_CULTURE_PREFIX) or not ui_culture_part.startswith(
        _UI_CULTURE_PREFIX
    ):
        return None

    culture = culture_part[len(_CULTURE_PREFIX):] or None
    ui_culture = ui_culture_part[len(_UI_CULTURE_PREFIX):] or None

    if culture is None and ui_culture is None:
        return None

    if culture is None:
        culture = ui_culture
    elif ui_culture is None:
        ui_culture = culture

    return ProviderCultureResult([culture], [ui_culture])


@register_culture_provider("cookie")
class CookieRequestCultureProvider(RequestCultureProvider):
    """Determine the culture from the culture cookie."""

    def __init__(self, cookie_name: str = DEFAULT_COOKIE_NAME):
        self.cookie_name = cookie_name

    @classmethod
    def from_settings(
        cls, settings: "LocalizationSettings"
    ) -> "CookieRequestCultureProvider":
        return cls(cookie_name=settings.culture_cookie_name)

    def determine_provider_culture_result(
        self, request: Request
    ) -> Optional[ProviderCultureResult]:
        return parse_cookie_value(request.cookies.get(self.cookie_name))
