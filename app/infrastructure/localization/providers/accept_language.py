"""Culture provider reading the Accept-Language request header."""

from typing import TYPE_CHECKING, List, Optional, Tuple

from starlette.requests import Request

from infrastructure.localization.models import ProviderCultureResult
from infrastructure.localization.providers import register_culture_provider
from infrastructure.localization.providers.base import RequestCultureProvider

if TYPE_CHECKING:
    from infrastructure.configuration import LocalizationSettings


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into language tags by preference.

    Tags are ordered by quality value, highest first; equal qualities keep
    header order. Entries with ``q=0``, the ``*`` wildcard and entries with
    an unparseable quality are dropped.

    Args:
        header: Header value, e.g. "vi-VN,vi;q=0.9,en-US;q=0.8".

    Returns:
        Language tags, most preferred first.
    """
    if not header:
        return []

    weighted: List[Tuple[float, str]] = []
    for part in header.split(","):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue

        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key.strip().lower() != "q":
                continue
            try:
                quality = float(value.strip())
            except ValueError:
                quality = -1.0
        if not 0.0 < quality <= 1.0:
            continue

        weighted.append((quality, tag))

    # sort is stable, so equal qualities keep header order
    weighted.sort(key=lambda item: item[0], reverse=True)
    return [tag for _, tag in weighted]


@register_culture_provider("accept_language")
class AcceptLanguageHeaderRequestCultureProvider(RequestCultureProvider):
    """Determine the culture from the Accept-Language header.

    Only the ``maximum_values_to_try`` most preferred tags are proposed.
    """

    def __init__(self, maximum_values_to_try: int = 3):
        self.maximum_values_to_try = maximum_values_to_try

    @classmethod
    def from_settings(
        cls, settings: "LocalizationSettings"
    ) -> "AcceptLanguageHeaderRequestCultureProvider":
        return cls(maximum_values_to_try=settings.max_accept_language_values)

    def determine_provider_culture_result(
        self, request: Request
    ) -> Optional[ProviderCultureResult]:
        tags = parse_accept_language(request.headers.get("accept-language"))
        if not tags:
            return None
        return ProviderCultureResult(tags[: self.maximum_values_to_try])
