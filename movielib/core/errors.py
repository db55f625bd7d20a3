"""
Taxonomie des erreurs du domaine.

Hierarchie :
- MovieLibError
  - ResolverError : echec de la recherche de metadonnees
    - ConfigError : cle API absente (aucun appel reseau)
    - TransportError : appel reseau impossible ou reponse illisible
    - NotFoundError : le service signale explicitement l'absence de resultat
  - ReconcileError : echec d'un scan de bibliotheque
    - DirectoryError : repertoire illisible
    - EmptyLibraryError : repertoire vide
    - PersistenceError : echec du stockage
    - ScanCancelledError : scan interrompu (timeout ou annulation)
  - RefreshError : echec du rafraichissement d'une entree
    - EntryNotFoundError : identifiant inconnu
    - ResolutionFailedError : la recherche de metadonnees a echoue
  - NotConfiguredError : aucun repertoire de bibliotheque configure
  - InvalidLibraryRootError : repertoire refuse par la validation
"""

from pathlib import Path
from typing import Optional


class MovieLibError(Exception):
    """Erreur de base de l'application."""


class ResolverError(MovieLibError):
    """Echec de la recherche de metadonnees aupres du service externe."""


class ConfigError(ResolverError):
    """Aucune cle API n'est disponible pour interroger le service."""


class TransportError(ResolverError):
    """L'appel reseau n'a pas pu aboutir ou sa reponse est inexploitable."""


class NotFoundError(ResolverError):
    """Le service indique explicitement qu'aucun film ne correspond."""


class ReconcileError(MovieLibError):
    """Echec d'une reconciliation de bibliotheque."""


class DirectoryError(ReconcileError):
    """Le repertoire de la bibliotheque ne peut pas etre liste."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"failed to read directory {path}: {reason}")


class EmptyLibraryError(ReconcileError):
    """Le repertoire de la bibliotheque ne contient aucune entree."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"directory is empty: {path}")


class PersistenceError(ReconcileError):
    """Le stockage du catalogue a echoue."""


class ScanCancelledError(ReconcileError):
    """
    Le scan a ete interrompu avant l'entree suivante.

    Attributes:
        added: Nombre d'entrees deja ajoutees (et conservees) avant l'arret
    """

    def __init__(self, added: int, reason: str = "scan cancelled") -> None:
        self.added = added
        super().__init__(f"{reason} after {added} new entries")


class RefreshError(MovieLibError):
    """Echec du rafraichissement d'une entree du catalogue."""


class EntryNotFoundError(RefreshError):
    """Aucune entree du catalogue ne porte cet identifiant."""

    def __init__(self, entry_id: int) -> None:
        self.entry_id = entry_id
        super().__init__(f"movie not found: {entry_id}")


class ResolutionFailedError(RefreshError):
    """
    La recherche de metadonnees a echoue lors d'un rafraichissement.

    Attributes:
        cause: L'erreur du resolveur a l'origine de l'echec
    """

    def __init__(self, cause: ResolverError) -> None:
        self.cause = cause
        super().__init__(f"Failed to fetch OMDB info: {cause}")


class NotConfiguredError(MovieLibError):
    """Aucun repertoire de bibliotheque n'a ete configure."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "library path is not configured")


class InvalidLibraryRootError(MovieLibError):
    """Le chemin propose comme repertoire de bibliotheque est invalide."""
