"""
Service de reconciliation de la bibliotheque.

Met le catalogue a jour avec le contenu d'un repertoire :
- Liste le repertoire (sans recursion) et filtre les videos par extension
- Ignore les fichiers deja catalogues (cle : nom de fichier brut)
- Devine titre et annee depuis le nom, puis interroge OMDb
- Persiste chaque nouvelle entree immediatement

Deux politiques d'erreur distinctes :
- scan complet : un echec de recherche OMDb est journalise et collecte dans
  le rapport, l'estimation locale est conservee (repli best-effort)
- rafraichissement d'une entree : un echec OMDb est remonte a l'appelant
  (ResolutionFailedError) et l'entree reste inchangee
"""

import asyncio
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

from movielib.core.entities.catalog import CatalogEntry
from movielib.core.errors import (
    DirectoryError,
    EmptyLibraryError,
    EntryNotFoundError,
    ResolutionFailedError,
    ResolverError,
    ScanCancelledError,
)
from movielib.core.ports.metadata import IMetadataResolver
from movielib.core.ports.parser import IFilenameParser
from movielib.core.ports.repositories import ICatalogRepository
from movielib.core.value_objects.library_config import LibraryConfig
from movielib.utils.helpers import file_extension


@dataclass
class UnresolvedFile:
    """Fichier catalogue avec l'estimation locale faute de metadonnees OMDb."""

    filename: str
    error: str


@dataclass
class ReconcileReport:
    """
    Resultat d'une reconciliation.

    Attributs:
        added: Nombre d'entrees ajoutees au catalogue
        skipped: Nombre de videos deja cataloguees
        unresolved: Echecs OMDb absorbes (l'entree a ete ajoutee quand meme)
    """

    added: int = 0
    skipped: int = 0
    unresolved: list[UnresolvedFile] = field(default_factory=list)


class LibraryReconciler:
    """
    Orchestre parser, resolveur et catalogue pour un repertoire.

    Le traitement est strictement sequentiel : chaque fichier est parse,
    resolu puis persiste avant de passer au suivant. Deux reconciliations
    concurrentes du meme repertoire peuvent creer des doublons (lecture
    puis insertion) : les appelants doivent les serialiser.
    """

    def __init__(
        self,
        catalog_repo: ICatalogRepository,
        filename_parser: IFilenameParser,
        metadata_resolver: IMetadataResolver,
    ) -> None:
        """
        Initialise le reconciliateur.

        Args:
            catalog_repo: Stockage du catalogue
            filename_parser: Parser de noms de fichiers
            metadata_resolver: Client de metadonnees (OMDb)
        """
        self._catalog_repo = catalog_repo
        self._filename_parser = filename_parser
        self._metadata_resolver = metadata_resolver

    async def reconcile(
        self,
        config: LibraryConfig,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ReconcileReport:
        """
        Scanne le repertoire et ajoute les videos inconnues au catalogue.

        Args:
            config: Repertoire, extensions acceptees et timeout du scan
            cancel_event: Evenement optionnel; s'il est leve, le scan s'arrete
                          avant l'entree suivante

        Returns:
            ReconcileReport (nombre d'ajouts, ignores, echecs OMDb absorbes)

        Raises:
            DirectoryError: Repertoire illisible
            EmptyLibraryError: Repertoire sans aucune entree
            PersistenceError: Echec du stockage (les ajouts precedents restent)
            ScanCancelledError: Timeout atteint ou annulation demandee
        """
        entries = self._list_directory(config.root)
        if not entries:
            raise EmptyLibraryError(config.root)

        deadline = (
            time.monotonic() + config.timeout_seconds
            if config.timeout_seconds is not None
            else None
        )
        report = ReconcileReport()

        for path in entries:
            self._check_cancelled(report, cancel_event, deadline)

            if path.is_dir():
                continue

            filename = path.name
            if not config.accepts(file_extension(filename)):
                continue

            if self._is_cataloged(filename):
                logger.debug(f"Deja catalogue: {filename}")
                report.skipped += 1
                continue

            entry = await self._build_entry(filename, report)
            saved = self._catalog_repo.insert(entry)
            report.added += 1
            logger.info(f"Added movie: {saved.title} ({saved.year})")

        logger.info(
            "Reconciliation terminee",
            root=str(config.root),
            added=report.added,
            skipped=report.skipped,
            unresolved=len(report.unresolved),
        )
        return report

    async def refresh_one(self, entry_id: int) -> CatalogEntry:
        """
        Relance la recherche OMDb pour une entree existante.

        Utilise le titre et l'annee actuellement stockes (pas le nom de
        fichier d'origine).

        Args:
            entry_id: ID de l'entree

        Returns:
            L'entree mise a jour

        Raises:
            EntryNotFoundError: ID inconnu
            ResolutionFailedError: Echec OMDb, l'entree n'est pas modifiee
            PersistenceError: Echec de la mise a jour
        """
        entry = self._catalog_repo.get_by_id(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)

        try:
            metadata = await self._metadata_resolver.resolve(entry.title, entry.year)
        except ResolverError as e:
            logger.warning(f"Rafraichissement impossible pour {entry.title}: {e}")
            raise ResolutionFailedError(e) from e

        entry.apply_metadata(metadata)
        updated = self._catalog_repo.update(entry)
        logger.info(f"Refreshed movie: {updated.title} ({updated.year})")
        return updated

    def _list_directory(self, root: Path) -> list[Path]:
        """Liste le repertoire trie par nom, DirectoryError si impossible."""
        try:
            return sorted(root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise DirectoryError(root, e.strerror or str(e)) from e

    def _is_cataloged(self, filename: str) -> bool:
        """Indique si une entree existe deja pour ce nom de fichier brut."""
        return (
            self._catalog_repo.find_by_filename(filename) is not None
            or self._catalog_repo.find_by_title(filename) is not None
        )

    async def _build_entry(self, filename: str, report: ReconcileReport) -> CatalogEntry:
        """Construit l'entree candidate : estimation locale puis enrichissement OMDb."""
        guess = self._filename_parser.parse(filename)
        entry = CatalogEntry(
            title=guess.title,
            year=guess.year,
            source_filename=filename,
        )

        try:
            metadata = await self._metadata_resolver.resolve(guess.title, guess.year)
        except ResolverError as e:
            # Repli best-effort : on garde l'estimation locale
            logger.warning(f"Failed to fetch OMDB info for {guess.title}: {e}")
            report.unresolved.append(UnresolvedFile(filename=filename, error=str(e)))
        else:
            entry.apply_metadata(metadata)

        return entry

    @staticmethod
    def _check_cancelled(
        report: ReconcileReport,
        cancel_event: Optional[asyncio.Event],
        deadline: Optional[float],
    ) -> None:
        """Leve ScanCancelledError si l'annulation ou le timeout est atteint."""
        if cancel_event is not None and cancel_event.is_set():
            raise ScanCancelledError(report.added)
        if deadline is not None and time.monotonic() >= deadline:
            raise ScanCancelledError(report.added, reason="scan timed out")
