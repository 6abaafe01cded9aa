from fastapi import APIRouter

from leadengine.api.v1.endpoints import health, leads, locale

router = APIRouter(prefix="/api/v1")

router.include_router(leads.router)
router.include_router(locale.router)
router.include_router(health.router)
