"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fourniront les mécanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).

Toute défaillance du stockage est signalée par PersistenceError.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from movielib.core.entities.catalog import CatalogEntry


class ICatalogRepository(ABC):
    """
    Interface de stockage du catalogue.

    Définit les opérations pour persister et récupérer les entités CatalogEntry.
    """

    @abstractmethod
    def count(self) -> int:
        """Retourne le nombre d'entrées du catalogue."""
        ...

    @abstractmethod
    def find_by_title(self, title: str) -> Optional[CatalogEntry]:
        """Récupère une entrée dont le titre est exactement celui donné."""
        ...

    @abstractmethod
    def find_by_filename(self, filename: str) -> Optional[CatalogEntry]:
        """Récupère l'entrée créée depuis ce nom de fichier brut."""
        ...

    @abstractmethod
    def insert(self, entry: CatalogEntry) -> CatalogEntry:
        """Insère une nouvelle entrée et la retourne avec son ID."""
        ...

    @abstractmethod
    def get_by_id(self, entry_id: int) -> Optional[CatalogEntry]:
        """Récupère une entrée par son ID."""
        ...

    @abstractmethod
    def update(self, entry: CatalogEntry) -> CatalogEntry:
        """Met à jour titre, année et poster d'une entrée existante."""
        ...

    @abstractmethod
    def list_all(self) -> list[CatalogEntry]:
        """Liste toutes les entrées du catalogue."""
        ...


class ILibrarySettingsRepository(ABC):
    """
    Interface de stockage du répertoire de bibliothèque.

    Un seul répertoire est actif à la fois.
    """

    @abstractmethod
    def get_library_root(self) -> Path:
        """
        Retourne le répertoire de bibliothèque.

        Lève :
            NotConfiguredError : aucun répertoire enregistré
        """
        ...

    @abstractmethod
    def set_library_root(self, path: Path) -> None:
        """Enregistre (création ou mise à jour) le répertoire de bibliothèque."""
        ...
