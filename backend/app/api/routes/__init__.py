"""Coleccion de routers de la API."""

from app.api.routes.comparison import router as comparison_router
from app.api.routes.readiness import router as readiness_router

__all__ = ["comparison_router", "readiness_router"]
