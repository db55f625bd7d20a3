"""
Facade applicative de la bibliotheque.

Point d'entree commun de l'API web et du CLI : lit le repertoire
enregistre, construit la LibraryConfig de chaque appel et delegue au
LibraryReconciler.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from movielib.config import Settings
from movielib.core.entities.catalog import CatalogEntry
from movielib.core.errors import InvalidLibraryRootError, NotConfiguredError
from movielib.core.ports.repositories import (
    ICatalogRepository,
    ILibrarySettingsRepository,
)
from movielib.core.value_objects.library_config import LibraryConfig
from movielib.services.reconciler import LibraryReconciler, ReconcileReport


class LibraryService:
    """
    Service de gestion de la bibliotheque.

    Coordonne:
    - Le repertoire de bibliotheque (ILibrarySettingsRepository)
    - Le catalogue (ICatalogRepository)
    - La reconciliation (LibraryReconciler)
    """

    def __init__(
        self,
        reconciler: LibraryReconciler,
        catalog_repo: ICatalogRepository,
        settings_repo: ILibrarySettingsRepository,
        settings: Settings,
    ) -> None:
        self._reconciler = reconciler
        self._catalog_repo = catalog_repo
        self._settings_repo = settings_repo
        self._settings = settings

    def build_config(self, root: Path) -> LibraryConfig:
        """Construit la configuration d'un scan pour ce repertoire."""
        return LibraryConfig(
            root=root,
            video_extensions=frozenset(self._settings.video_extensions),
            timeout_seconds=self._settings.scan_timeout_seconds,
        )

    async def list_library(self) -> list[CatalogEntry]:
        """
        Liste le catalogue, en lancant le premier scan si le catalogue est vide.

        Raises:
            NotConfiguredError: Aucun repertoire configure
            ReconcileError: Echec du premier scan
        """
        root = self._settings_repo.get_library_root()

        if self._catalog_repo.count() == 0:
            logger.info(f"Catalogue vide, premier scan de {root}")
            await self._reconciler.reconcile(self.build_config(root))

        return self._catalog_repo.list_all()

    async def rescan(self) -> ReconcileReport:
        """
        Force une reconciliation du repertoire configure.

        Raises:
            NotConfiguredError: Aucun repertoire configure
            ReconcileError: Echec du scan
        """
        root = self._settings_repo.get_library_root()
        return await self._reconciler.reconcile(self.build_config(root))

    async def refresh(self, entry_id: int) -> CatalogEntry:
        """Relance la recherche OMDb pour une entree (voir LibraryReconciler.refresh_one)."""
        return await self._reconciler.refresh_one(entry_id)

    def get_library_root(self) -> Optional[Path]:
        """Retourne le repertoire configure, ou None s'il n'y en a pas."""
        try:
            return self._settings_repo.get_library_root()
        except NotConfiguredError:
            return None

    def set_library_root(self, lib_path: str) -> Path:
        """
        Valide puis enregistre le repertoire de bibliotheque.

        Args:
            lib_path: Chemin saisi par l'utilisateur (~ accepte)

        Returns:
            Le chemin enregistre

        Raises:
            InvalidLibraryRootError: Chemin vide ou inexistant
        """
        if not lib_path or not lib_path.strip():
            raise InvalidLibraryRootError("LibPath cannot be empty")

        path = Path(lib_path.strip()).expanduser()
        if not path.exists():
            raise InvalidLibraryRootError("Directory does not exist")

        self._settings_repo.set_library_root(path)
        logger.info(f"Repertoire de bibliotheque: {path}")
        return path
