"""API routers for the FridgeBud application."""

from fridgebud.routers.catalog import router as catalog_router
from fridgebud.routers.meals import router as meals_router
from fridgebud.routers.voice import router as voice_router

__all__ = [
    "catalog_router",
    "meals_router",
    "voice_router",
]
