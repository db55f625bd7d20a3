"""
Routes des films: rafraîchissement des métadonnées d'une entrée.
"""

from fastapi import APIRouter, Request

from ...core.errors import EntryNotFoundError, PersistenceError, ResolutionFailedError
from ..deps import entry_payload, error_response, get_container

router = APIRouter(prefix="/movies")


@router.post("/{movie_id}/refresh")
async def refresh_movie(request: Request, movie_id: int):
    """Relance la recherche OMDb pour un film et retourne l'entrée mise à jour."""
    service = get_container(request).library_service()
    try:
        entry = await service.refresh(movie_id)
    except EntryNotFoundError:
        return error_response(404, "Movie not found")
    except ResolutionFailedError as e:
        return error_response(502, str(e))
    except PersistenceError:
        return error_response(500, "Failed to update movie")

    return entry_payload(entry)
