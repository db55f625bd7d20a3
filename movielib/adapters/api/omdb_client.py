"""
Client OMDb pour la recherche de metadonnees de films.

Implemente l'interface IMetadataResolver pour OMDb (Open Movie Database).
Une recherche par titre exact (parametre "t") retourne un seul film;
l'annee, si connue, sert a departager les homonymes.

Usage:
    client = OMDbClient(api_key="your_key")
    metadata = await client.resolve("The Matrix", year=1999)
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from movielib.adapters.api.retry import RateLimitError, request_with_retry
from movielib.core.errors import ConfigError, NotFoundError, TransportError
from movielib.core.ports.metadata import IMetadataResolver
from movielib.core.value_objects.metadata import ResolvedMetadata
from movielib.utils.constants import OMDB_NOT_AVAILABLE


class OMDbClient(IMetadataResolver):
    """
    Client API OMDb.

    Implemente IMetadataResolver avec:
    - Recherche d'un film par titre (avec annee optionnelle)
    - Retry automatique sur rate limiting (429)
    - Traduction des echecs en ConfigError / TransportError / NotFoundError

    Aucun cache : chaque appel interroge le service.

    Attributes:
        OMDB_BASE_URL: URL par defaut de l'API OMDb
    """

    OMDB_BASE_URL = "http://www.omdbapi.com/"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = OMDB_BASE_URL,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialise le client OMDb.

        Args:
            api_key: Cle API OMDb (None ou vide : chaque resolve leve ConfigError)
            base_url: URL de l'API
            timeout: Timeout des requetes en secondes
        """
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "omdb"

    async def resolve(self, title: str, year: int = 0) -> ResolvedMetadata:
        """
        Recherche un film par titre.

        Args:
            title: Titre du film
            year: Annee de sortie (envoyee seulement si > 0)

        Returns:
            ResolvedMetadata avec le titre officiel, l'annee et le poster

        Raises:
            ConfigError: Cle API absente
            TransportError: Echec reseau, statut HTTP d'erreur ou JSON invalide
            NotFoundError: OMDb repond Response="False"
        """
        if not self._api_key:
            raise ConfigError("OMDB_API_KEY environment variable not set")

        params = {"apikey": self._api_key, "t": title}
        if year > 0:
            params["y"] = str(year)

        logger.debug("Requete OMDb", title=title, year=year)
        data = await self._fetch(params)

        if data.get("Response") == "False":
            raise NotFoundError(f"movie not found: {data.get('Error', 'unknown error')}")

        return self._to_metadata(data)

    async def _fetch(self, params: dict[str, str]) -> dict[str, Any]:
        """Execute la requete et retourne le corps JSON decode."""
        client = self._get_client()
        try:
            response = await request_with_retry(client, "GET", self._base_url, params=params)
        except RateLimitError as e:
            raise TransportError(f"failed to fetch movie info: {e}") from e
        except httpx.HTTPStatusError as e:
            detail = f"HTTP {e.response.status_code}"
            service_error = self._error_message(e.response)
            if service_error:
                detail = f"{detail}: {service_error}"
            raise TransportError(f"failed to fetch movie info: {detail}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"failed to fetch movie info: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"failed to decode response: {e}") from e

        if not isinstance(data, dict):
            raise TransportError("failed to decode response: unexpected payload")
        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        """Message "Error" du corps JSON d'une reponse d'erreur (ex: cle invalide)."""
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict) and data.get("Error"):
            return str(data["Error"])
        return None

    @staticmethod
    def _to_metadata(data: dict[str, Any]) -> ResolvedMetadata:
        """Convertit la reponse OMDb en ResolvedMetadata."""
        # Year est une chaine ("1999", ou "2008–2013" pour une serie)
        try:
            year: Optional[int] = int(data.get("Year", ""))
        except (TypeError, ValueError):
            year = None

        poster = data.get("Poster") or ""
        if poster == OMDB_NOT_AVAILABLE:
            poster = ""

        return ResolvedMetadata(
            title=(data.get("Title") or "").strip(),
            year=year,
            poster_url=poster,
        )

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
