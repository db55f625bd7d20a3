"""
Routes de la bibliothèque: liste du catalogue et rescan.
"""

from fastapi import APIRouter, Request
from loguru import logger

from ...core.errors import MovieLibError, NotConfiguredError
from ..deps import entry_payload, error_response, get_container, success_payload

router = APIRouter(prefix="/library")


@router.get("")
async def show_library(request: Request):
    """Liste le catalogue. Au premier appel (catalogue vide), scanne le répertoire."""
    service = get_container(request).library_service()
    try:
        entries = await service.list_library()
    except NotConfiguredError:
        return error_response(400, "Setup app first")
    except MovieLibError as e:
        logger.error(f"Echec du chargement de la bibliothèque: {e}")
        return error_response(500, str(e))

    return [entry_payload(entry) for entry in entries]


@router.post("/rescan")
async def rescan_library(request: Request):
    """Force un rescan du répertoire et ajoute les nouveaux fichiers."""
    service = get_container(request).library_service()
    try:
        report = await service.rescan()
    except NotConfiguredError:
        return error_response(400, "No library path configured")
    except MovieLibError as e:
        logger.error(f"Echec du rescan: {e}")
        return error_response(500, str(e))

    return success_payload(
        "Library rescanned successfully",
        added=report.added,
        unresolved=len(report.unresolved),
    )
