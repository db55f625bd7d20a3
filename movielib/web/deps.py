"""
Dépendances partagées de l'application web.

Fournit l'accès au Container DI et la mise en forme des réponses JSON
(enveloppes d'erreur et de succès, sérialisation des entrées du catalogue).
"""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from ..container import Container
from ..core.entities.catalog import CatalogEntry


def get_container(request: Request) -> Container:
    """Retourne le Container DI attaché à l'application."""
    return request.app.state.container


def error_response(status_code: int, message: str) -> JSONResponse:
    """Réponse JSON d'erreur : {"error": message}."""
    return JSONResponse({"error": message}, status_code=status_code)


def success_payload(message: str, **extra: Any) -> dict[str, Any]:
    """Corps JSON de succès : {"message": message, ...}."""
    return {"message": message, **extra}


def entry_payload(entry: CatalogEntry) -> dict[str, Any]:
    """Sérialise une entrée du catalogue."""
    return {
        "id": entry.id,
        "title": entry.title,
        "year": entry.year,
        "poster_url": entry.poster_url,
        "source_filename": entry.source_filename,
        "created_at": entry.created_at.isoformat() if entry.created_at else None,
        "updated_at": entry.updated_at.isoformat() if entry.updated_at else None,
    }
