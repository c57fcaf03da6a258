"""Request localization feature settings."""

import json
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode
import structlog

from infrastructure.configuration.base import FeatureSettings

logger = structlog.stdlib.get_logger().bind(component="config.localization")


def _parse_name_list(value: Any, setting_name: str) -> Any:
    """Accept a JSON list, a comma separated string or a sequence."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value]
    if isinstance(value, str):
        s = value.strip()
        if s.lower() == "null":
            return None
        if s.startswith("["):
            try:
                parsed = json.loads(s)
            except (json.JSONDecodeError, ValueError) as e:
                raise ValueError(
                    f"Invalid {setting_name} JSON: {e} (value: {s[:80]}...)"
                ) from e
            return [str(item).strip() for item in parsed]
        return [part.strip() for part in s.split(",") if part.strip()]
    raise ValueError(f"{setting_name} must be a JSON list or a comma separated string")


class LocalizationSettings(FeatureSettings):
    """Configuration for per-request culture negotiation.

    Environment Variables:
        DEFAULT_REQUEST_CULTURE: Culture used when no provider matches
        DEFAULT_REQUEST_UI_CULTURE: UI culture used when no provider matches
            (defaults to DEFAULT_REQUEST_CULTURE)
        SUPPORTED_CULTURES: Ordered list of supported cultures, ``null``
            disables culture matching
        SUPPORTED_UI_CULTURES: Ordered list of supported UI cultures, ``null``
            disables UI culture matching
        FALLBACK_TO_PARENT_CULTURES: Try parent cultures (en-US -> en)
        FALLBACK_TO_PARENT_UI_CULTURES: Try parent UI cultures
        APPLY_CURRENT_CULTURE_TO_RESPONSE_HEADERS: Write Content-Language
        REQUEST_CULTURE_PROVIDERS: Ordered provider names
            (route, query_string, cookie, accept_language)
        ROUTE_SEGMENT_INDEX: Path segment read by the route provider
        CULTURE_COOKIE_NAME: Cookie read by the cookie provider
        MAX_ACCEPT_LANGUAGE_VALUES: Accept-Language values tried per request

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        default = settings.localization.default_request_culture
        providers = settings.localization.request_culture_providers
        ```
    """

    default_request_culture: str = Field(
        default="vi",
        alias="DEFAULT_REQUEST_CULTURE",
        description="Culture used when no provider yields a supported culture",
    )
    default_request_ui_culture: Optional[str] = Field(
        default=None,
        alias="DEFAULT_REQUEST_UI_CULTURE",
        description="UI culture used when no provider yields a supported UI culture",
    )
    supported_cultures: Annotated[Optional[List[str]], NoDecode] = Field(
        default_factory=lambda: ["en", "vi"],
        alias="SUPPORTED_CULTURES",
    )
    supported_ui_cultures: Annotated[Optional[List[str]], NoDecode] = Field(
        default_factory=lambda: ["en", "vi"],
        alias="SUPPORTED_UI_CULTURES",
    )
    fallback_to_parent_cultures: bool = Field(
        default=True,
        alias="FALLBACK_TO_PARENT_CULTURES",
    )
    fallback_to_parent_ui_cultures: bool = Field(
        default=True,
        alias="FALLBACK_TO_PARENT_UI_CULTURES",
    )
    apply_current_culture_to_response_headers: bool = Field(
        default=False,
        alias="APPLY_CURRENT_CULTURE_TO_RESPONSE_HEADERS",
    )
    request_culture_providers: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["route"],
        alias="REQUEST_CULTURE_PROVIDERS",
        description="Provider names consulted in order; the first usable result wins",
    )
    route_segment_index: int = Field(
        default=0,
        alias="ROUTE_SEGMENT_INDEX",
        ge=0,
    )
    culture_cookie_name: str = Field(
        default="request-culture",
        alias="CULTURE_COOKIE_NAME",
    )
    max_accept_language_values: int = Field(
        default=3,
        alias="MAX_ACCEPT_LANGUAGE_VALUES",
        ge=1,
    )

    @field_validator("supported_cultures", mode="before")
    @classmethod
    def _parse_supported_cultures(cls, v: Any) -> Any:
        return _parse_name_list(v, "SUPPORTED_CULTURES")

    @field_validator("supported_ui_cultures", mode="before")
    @classmethod
    def _parse_supported_ui_cultures(cls, v: Any) -> Any:
        return _parse_name_list(v, "SUPPORTED_UI_CULTURES")

    @field_validator("request_culture_providers", mode="before")
    @classmethod
    def _parse_providers(cls, v: Any) -> Any:
        parsed = _parse_name_list(v, "REQUEST_CULTURE_PROVIDERS")
        if parsed is None:
            return []
        return [name.lower() for name in parsed]

    @field_validator("request_culture_providers", mode="after")
    @classmethod
    def _warn_on_empty_providers(cls, v: List[str]) -> List[str]:
        if not v:
            logger.warning("no_request_culture_providers_configured")
        return v

    @property
    def resolved_default_ui_culture(self) -> str:
        """UI culture used for defaults, falling back to the default culture."""
        if self.default_request_ui_culture is None:
            return self.default_request_culture
        return self.default_request_ui_culture
