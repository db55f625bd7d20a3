"""
Interface port pour la recherche de métadonnées de films.

L'implémentation concrète interroge l'API OMDb (adapters/api/omdb_client.py).
"""

from abc import ABC, abstractmethod

from movielib.core.value_objects.metadata import ResolvedMetadata


class IMetadataResolver(ABC):
    """
    Interface de recherche de métadonnées canoniques.

    Traduit une estimation (titre, année) en métadonnées officielles.
    Aucune mise en cache : chaque appel interroge le service.
    """

    @abstractmethod
    async def resolve(self, title: str, year: int = 0) -> ResolvedMetadata:
        """
        Recherche les métadonnées d'un film.

        Args :
            title : Titre à rechercher
            year : Année utilisée pour départager les homonymes (ignorée si 0)

        Retourne :
            ResolvedMetadata avec titre, année et poster

        Lève :
            ConfigError : aucune clé API disponible
            TransportError : l'appel réseau n'a pas abouti
            NotFoundError : le service ne trouve aucun film
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source (ex: 'omdb')."""
        ...

    async def close(self) -> None:
        """Libère les ressources réseau (aucune par défaut)."""
