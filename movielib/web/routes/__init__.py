"""
Routes de l'API JSON.

Toutes les routes sont montées sous le préfixe /api.
"""

from fastapi import APIRouter

from . import library, movies, settings

router = APIRouter(prefix="/api")

router.include_router(library.router)
router.include_router(movies.router)
router.include_router(settings.router)
