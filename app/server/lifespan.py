from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging import configure_logging
from infrastructure.services import get_localization_options, get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _log_configuration(settings: "Settings", logger: BoundLogger) -> None:
    groups = {
        name: sorted(values)
        for name, values in settings.model_dump().items()
        if isinstance(values, dict)
    }
    logger.info(
        "configuration_initialized",
        prefix=settings.PREFIX,
        log_level=settings.LOG_LEVEL,
        git_sha=settings.GIT_SHA,
        groups=groups,
    )


def _activate_localization(app: FastAPI, logger: BoundLogger) -> None:
    """Resolve the localization options once, before serving requests.

    Options passed to ``create_app`` win over the configured ones. Invalid
    configuration aborts startup.
    """
    options = getattr(app.state, "localization_options", None)
    try:
        if options is None:
            options = get_localization_options()
    except Exception as exc:
        logger.error("localization_activation_failed", error=str(exc))
        raise

    app.state.localization_options = options
    logger.info(
        "localization_activated",
        default_culture=options.default_request_culture.culture,
        default_ui_culture=options.default_request_culture.ui_culture,
        supported_cultures=options.supported_cultures,
        providers=options.provider_names,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = configure_logging(settings=settings)

    app.state.settings = settings
    logger.info("application_startup")
    _log_configuration(settings, logger)
    _activate_localization(app, logger)

    try:
        yield
    finally:
        logger.info("application_shutdown")
