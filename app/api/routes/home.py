"""Culture-prefixed home routes.

Routes follow ``/{culture}/{controller=Home}/{action=Index}/{id?}``. The
``culture`` segment is read by the route culture provider before routing;
handlers use the negotiated result, not the raw segment.
"""

from datetime import date
from typing import Optional

from babel import Locale, UnknownLocaleError
from babel.dates import format_date
from fastapi import APIRouter

from api.v1.schemas import HomeIndexResponse
from infrastructure.localization import parent_culture_name
from infrastructure.services import RequestCultureDep

router = APIRouter(tags=["Home"])


def _long_date(today: date, culture: str) -> str:
    """Long date in the closest culture CLDR has data for.

    Well-formed cultures without CLDR data (en-VN) format as their parent.
    The invariant culture formats as ISO 8601.
    """
    name: Optional[str] = culture
    while name:
        try:
            locale = Locale.parse(name, sep="-")
        except (UnknownLocaleError, ValueError):
            name = parent_culture_name(name)
            continue
        return format_date(today, format="long", locale=locale)
    return today.isoformat()


@router.get("/{culture}", response_model=HomeIndexResponse)
@router.get("/{culture}/Home", response_model=HomeIndexResponse)
@router.get("/{culture}/Home/Index", response_model=HomeIndexResponse)
@router.get("/{culture}/Home/Index/{id}", response_model=HomeIndexResponse)
def home_index(
    culture: str,  # pylint: disable=unused-argument
    request_culture: RequestCultureDep,
    id: Optional[str] = None,  # pylint: disable=redefined-builtin,unused-argument
) -> HomeIndexResponse:
    """Render the negotiated culture and today's date in its long format."""
    resolved = request_culture.request_culture
    return HomeIndexResponse(
        culture=resolved.culture,
        ui_culture=resolved.ui_culture,
        provider=request_culture.provider_name,
        date=_long_date(date.today(), resolved.culture),
    )
