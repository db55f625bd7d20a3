"""
Routes des réglages: répertoire de la bibliothèque.
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field

from ...core.errors import InvalidLibraryRootError, PersistenceError
from ..deps import error_response, get_container, success_payload

router = APIRouter(prefix="/settings")


class SettingsRequest(BaseModel):
    """Corps de POST /api/settings."""

    model_config = ConfigDict(populate_by_name=True)

    lib_path: str = Field(default="", alias="libPath")


@router.get("")
async def show_settings(request: Request):
    """Retourne le répertoire de bibliothèque configuré (null si aucun)."""
    service = get_container(request).library_service()
    root = service.get_library_root()
    return {"lib_path": str(root) if root else None}


@router.post("")
async def set_settings(request: Request, body: SettingsRequest):
    """Valide et enregistre le répertoire de bibliothèque."""
    service = get_container(request).library_service()
    try:
        service.set_library_root(body.lib_path)
    except InvalidLibraryRootError as e:
        return error_response(400, str(e))
    except PersistenceError:
        return error_response(500, "Error saving settings")

    return success_payload("Settings saved successfully")
