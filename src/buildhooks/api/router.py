"""Main API router aggregation."""

from fastapi import APIRouter

from .health import router as health_router
from .hooks import router as hooks_router

router = APIRouter()

# Include sub-routers
router.include_router(health_router)
router.include_router(hooks_router)
