"""
Implementation SQLModel du repository des reglages.

Le repertoire de bibliotheque est stocke dans la premiere ligne de la
table settings.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from movielib.core.errors import NotConfiguredError, PersistenceError
from movielib.core.ports.repositories import ILibrarySettingsRepository
from movielib.infrastructure.persistence.models import SettingsModel


class SQLModelLibrarySettingsRepository(ILibrarySettingsRepository):
    """Repository SQLModel pour le repertoire de bibliotheque."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _first(self) -> Optional[SettingsModel]:
        statement = select(SettingsModel).order_by(SettingsModel.id)
        try:
            return self._session.exec(statement).first()
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to read settings: {e}") from e

    def get_library_root(self) -> Path:
        """Retourne le repertoire enregistre, NotConfiguredError sinon."""
        settings = self._first()
        if settings is None or not settings.lib_path:
            raise NotConfiguredError()
        return Path(settings.lib_path)

    def set_library_root(self, path: Path) -> None:
        """Cree ou met a jour la ligne de reglages."""
        settings = self._first()
        if settings is None:
            settings = SettingsModel(lib_path=str(path))
        else:
            settings.lib_path = str(path)
            settings.updated_at = datetime.now(timezone.utc)

        try:
            self._session.add(settings)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise PersistenceError(f"failed to save settings: {e}") from e
