from fastapi import APIRouter
from api.routes.system import router as system_router
from api.routes.home import router as home_router
from api.v1.router import router as v1_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(v1_router, prefix="/api/v1")
# Culture-prefixed routes match any first segment, so they go last
api_router.include_router(home_router)
