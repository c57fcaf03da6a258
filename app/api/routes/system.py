from fastapi import APIRouter, Request

from api.dependencies.rate_limits import limiter
from infrastructure.services import SettingsDep, get_settings

router = APIRouter(tags=["System"])

# Decorator arguments are evaluated at import time
SYSTEM_RATE_LIMIT = get_settings().server.RATE_LIMIT_SYSTEM


@router.get("/version")
@limiter.limit(SYSTEM_RATE_LIMIT)
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Deployed commit SHA."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(SYSTEM_RATE_LIMIT)
def get_health(request: Request):  # pylint: disable=unused-argument
    """Liveness check for the load balancer."""
    return {"status": "ok"}
