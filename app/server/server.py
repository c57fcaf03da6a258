from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.localization import LocalizationOptions
from infrastructure.logging import get_module_logger
from infrastructure.services import get_localization_options, get_settings
from server.lifespan import lifespan
from server.localization_middleware import RequestLocalizationMiddleware

logger = get_module_logger()


def create_app(options: Optional[LocalizationOptions] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        options: Localization options; the application-scoped options are
            used when omitted.
    """
    settings = get_settings()
    app = FastAPI(
        title="Request Culture Negotiation",
        version=settings.GIT_SHA,
        lifespan=lifespan,
    )
    if options is not None:
        app.state.localization_options = options
        app.dependency_overrides[get_localization_options] = lambda: options
    setup_rate_limiter(app, enabled=settings.server.RATE_LIMIT_ENABLED)

    # Last added runs first: localization negotiates before CORS handling
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLocalizationMiddleware, options=options)

    app.include_router(api_router)
    return app


handler = create_app()
