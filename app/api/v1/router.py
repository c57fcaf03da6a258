from fastapi import APIRouter
from api.v1.routes.localization import router as localization_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(localization_router)
