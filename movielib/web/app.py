"""
Application FastAPI de MovieLib.

Initialise l'application web avec le Container DI, configure CORS et la
journalisation des requêtes, et monte les routes de l'API JSON.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ..container import Container
from .deps import error_response
from .routes import router as api_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application FastAPI.

    Args:
        container: Container DI à utiliser (un nouveau Container par défaut,
                   les tests y injectent leurs surcharges)
    """
    container = container or Container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise la base au démarrage, ferme le client OMDb à l'arrêt."""
        container.database.init()
        app.state.container = container
        try:
            yield
        finally:
            await container.omdb_client().close()
            container.shutdown_resources()

    app = FastAPI(title="MovieLib", lifespan=lifespan)

    settings = container.config()
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.cors_origin_regex,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Accept", "Authorization", "Content-Type", "X-CSRF-Token"],
        expose_headers=["Link"],
        allow_credentials=False,
        max_age=300,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Journalise chaque requête avec son statut et sa durée."""
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """
        Identifiant de film invalide : 404, comme un identifiant inconnu.
        Corps de requête illisible : 400 avec l'enveloppe d'erreur.
        """
        errors = exc.errors()
        in_path = any((err.get("loc") or ("",))[0] == "path" for err in errors)
        if in_path and request.url.path.startswith("/api/movies/"):
            return error_response(404, "Movie not found")
        return error_response(400, f"Error decoding request body: {errors}")

    app.include_router(api_router)
    return app


app = create_app()
