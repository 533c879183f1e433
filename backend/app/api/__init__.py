from fastapi import APIRouter

from app.api.routes import comparison_router, readiness_router

router = APIRouter()
router.include_router(comparison_router)
router.include_router(readiness_router)

__all__ = ["router"]
