"""Request localization - per-request culture negotiation.

Resolves, for each request, the culture and UI culture that govern the
rest of request processing, and exposes the decision to downstream code.

Main components:
- models: RequestCulture, ProviderCultureResult, RequestCultureFeature,
  LocalizationOptions
- cultures: culture name parsing and parent resolution (BCP 47 structure via babel)
- matcher: matching candidates against supported cultures with fallback
- providers: RequestCultureProvider, the provider registry and built-ins
- negotiation: negotiate()
- context: apply_request_culture() and the request/ambient readers
- factory: build_localization_options()
"""

from infrastructure.localization.context import (
    apply_request_culture,
    get_current_culture,
    get_current_request_culture,
    get_current_ui_culture,
    get_request_culture,
    reset_request_culture,
    write_content_language,
)
from infrastructure.localization.cultures import (
    INVARIANT_CULTURE,
    parent_culture_name,
    parse_culture_name,
)
from infrastructure.localization.errors import (
    CultureNegotiationNotRunError,
    LocalizationError,
    RequestCultureAlreadySetError,
    RequestCultureNotSetError,
)
from infrastructure.localization.factory import build_localization_options
from infrastructure.localization.matcher import (
    MAX_CULTURE_FALLBACK_DEPTH,
    match_any_culture,
    match_culture,
    match_culture_with_fallback,
)
from infrastructure.localization.models import (
    LocalizationOptions,
    ProviderCultureResult,
    RequestCulture,
    RequestCultureFeature,
)
from infrastructure.localization.negotiation import negotiate
from infrastructure.localization.providers import (
    RequestCultureProvider,
    create_culture_providers,
    register_culture_provider,
)
from infrastructure.localization.providers.accept_language import (
    AcceptLanguageHeaderRequestCultureProvider,
)
from infrastructure.localization.providers.cookie import CookieRequestCultureProvider
from infrastructure.localization.providers.query_string import (
    QueryStringRequestCultureProvider,
)
from infrastructure.localization.providers.route import (
    RouteDataRequestCultureProvider,
)

__all__ = [
    # Models
    "RequestCulture",
    "ProviderCultureResult",
    "RequestCultureFeature",
    "LocalizationOptions",
    # Culture names
    "INVARIANT_CULTURE",
    "parse_culture_name",
    "parent_culture_name",
    # Matching
    "MAX_CULTURE_FALLBACK_DEPTH",
    "match_culture",
    "match_culture_with_fallback",
    "match_any_culture",
    # Providers
    "RequestCultureProvider",
    "register_culture_provider",
    "create_culture_providers",
    "RouteDataRequestCultureProvider",
    "QueryStringRequestCultureProvider",
    "CookieRequestCultureProvider",
    "AcceptLanguageHeaderRequestCultureProvider",
    # Negotiation and context
    "negotiate",
    "apply_request_culture",
    "reset_request_culture",
    "write_content_language",
    "get_request_culture",
    "get_current_request_culture",
    "get_current_culture",
    "get_current_ui_culture",
    "build_localization_options",
    # Errors
    "LocalizationError",
    "CultureNegotiationNotRunError",
    "RequestCultureAlreadySetError",
    "RequestCultureNotSetError",
]
