"""Request localization middleware.

Runs culture negotiation for every HTTP request before routing, publishes
the result for downstream handlers, and writes Content-Language when the
response starts.

Plain ASGI: the ambient culture must be set in the context the endpoint
runs in, and Content-Language must be written before any body bytes.
"""

from typing import Optional

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from infrastructure.localization import (
    LocalizationOptions,
    apply_request_culture,
    negotiate,
    reset_request_culture,
    write_content_language,
)
from infrastructure.logging import bind_request_context
from infrastructure.services import get_localization_options


class RequestLocalizationMiddleware:
    """Negotiate and apply the request culture for each HTTP request.

    Args:
        app: The wrapped ASGI application.
        options: Localization options. Defaults to the application-scoped
            options from ``get_localization_options`` on first request.
    """

    def __init__(self, app: ASGIApp, options: Optional[LocalizationOptions] = None):
        self.app = app
        self._options = options

    @property
    def options(self) -> LocalizationOptions:
        if self._options is None:
            self._options = get_localization_options()
        return self._options

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        options = self.options
        request = Request(scope)
        feature = negotiate(request, options)
        token = apply_request_culture(request, feature)

        async def send_with_content_language(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                write_content_language(headers, feature, options)
            await send(message)

        try:
            with bind_request_context(
                correlation_id=request.headers.get("x-correlation-id"),
                request_path=request.url.path,
                request_method=request.method,
                culture=feature.request_culture.culture,
                ui_culture=feature.request_culture.ui_culture,
                culture_provider=feature.provider_name,
            ):
                await self.app(scope, receive, send_with_content_language)
        finally:
            reset_request_culture(token)
