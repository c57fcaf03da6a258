"""Response models for the localization API."""

from typing import List, Optional

from pydantic import BaseModel


class HomeIndexResponse(BaseModel):
    culture: str
    ui_culture: str
    provider: Optional[str] = None
    date: str


class RequestCultureResponse(BaseModel):
    """Negotiated culture of the current request.

    ``current_culture`` and ``current_ui_culture`` are read from the ambient
    context inside the handler and always equal the negotiated pair.
    """

    culture: str
    ui_culture: str
    provider: Optional[str] = None
    current_culture: Optional[str] = None
    current_ui_culture: Optional[str] = None


class LocalizationOptionsResponse(BaseModel):
    default_culture: str
    default_ui_culture: str
    supported_cultures: Optional[List[str]] = None
    supported_ui_cultures: Optional[List[str]] = None
    fallback_to_parent_cultures: bool
    fallback_to_parent_ui_cultures: bool
    apply_current_culture_to_response_headers: bool
    providers: List[str]
