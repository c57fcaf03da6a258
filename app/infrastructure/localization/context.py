"""Request-scoped culture context.

The negotiated culture is published twice for each request:

* as a feature in the request scope state, readable by any handler
  holding the request (``get_request_culture``);
* as the ambient culture in a ContextVar, readable by code that has no
  request at hand (``get_current_culture``).

ContextVars are copied per asyncio task and into threadpool calls, so
concurrent requests never see each other's culture.
"""

from contextvars import ContextVar, Token
from typing import Optional

from starlette.datastructures import MutableHeaders
from starlette.requests import Request

from infrastructure.localization.errors import (
    CultureNegotiationNotRunError,
    RequestCultureAlreadySetError,
    RequestCultureNotSetError,
)
from infrastructure.localization.models import (
    LocalizationOptions,
    RequestCulture,
    RequestCultureFeature,
)

REQUEST_CULTURE_STATE_KEY = "request_culture"
CONTENT_LANGUAGE_HEADER = "Content-Language"

_current_request_culture: ContextVar[Optional[RequestCulture]] = ContextVar(
    "current_request_culture", default=None
)


def apply_request_culture(
    request: Request, result: Optional[RequestCultureFeature]
) -> Token:
    """Publish a negotiation result for the rest of the request.

    Both the feature and the ambient culture are set without suspending in
    between, so downstream code observes both or neither.

    Args:
        request: The current request.
        result: The result returned by ``negotiate``.

    Returns:
        Token restoring the previous ambient culture via
        ``reset_request_culture``.

    Raises:
        CultureNegotiationNotRunError: If ``result`` is None.
        RequestCultureAlreadySetError: If a result was already published for
            this request.
    """
    if result is None:
        raise CultureNegotiationNotRunError(
            "apply_request_culture() called without a negotiation result"
        )

    state = request.scope.setdefault("state", {})
    if REQUEST_CULTURE_STATE_KEY in state:
        raise RequestCultureAlreadySetError(
            "A request culture was already published for this request"
        )

    state[REQUEST_CULTURE_STATE_KEY] = result
    return _current_request_culture.set(result.request_culture)


def reset_request_culture(token: Token) -> None:
    """Restore the ambient culture that was active before apply."""
    _current_request_culture.reset(token)


def write_content_language(
    headers: MutableHeaders,
    result: RequestCultureFeature,
    options: LocalizationOptions,
) -> None:
    """Set Content-Language to the resolved UI culture when enabled.

    Headers are left untouched when
    ``apply_current_culture_to_response_headers`` is off.
    """
    if not options.apply_current_culture_to_response_headers:
        return
    headers[CONTENT_LANGUAGE_HEADER] = result.request_culture.ui_culture


def get_request_culture(request: Request) -> RequestCultureFeature:
    """Return the feature published for ``request``.

    Raises:
        RequestCultureNotSetError: If nothing was published, i.e. the
            localization middleware did not run for this request.
    """
    state = request.scope.get("state") or {}
    feature = state.get(REQUEST_CULTURE_STATE_KEY)
    if feature is None:
        raise RequestCultureNotSetError(
            "No request culture was published for this request; "
            "is RequestLocalizationMiddleware installed?"
        )
    return feature


def get_current_request_culture() -> Optional[RequestCulture]:
    """Ambient culture pair of the current request, None outside requests."""
    return _current_request_culture.get()


def get_current_culture() -> Optional[str]:
    request_culture = get_current_request_culture()
    return None if request_culture is None else request_culture.culture


def get_current_ui_culture() -> Optional[str]:
    request_culture = get_current_request_culture()
    return None if request_culture is None else request_culture.ui_culture
