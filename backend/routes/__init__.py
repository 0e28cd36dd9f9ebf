"""FastAPI API endpoints under /api.

Endpoint groups: health, games (catalogs, defaults, draws, weight previews,
pocket-pick candidates) and drawing actions. Drawings are not stored: clients
post the Drawing back with each action and receive the updated copy.
"""

from fastapi import APIRouter

from .drawings import router as drawings_router
from .games import router as games_router
from .health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(games_router)
router.include_router(drawings_router)
