"""
Relance des requetes HTTP limitees en debit (429) avec backoff exponentiel.

OMDb applique un quota par cle API : une reponse 429 est relancee avec un
delai croissant et du jitter. Les autres erreurs remontent immediatement.

Usage:
    response = await request_with_retry(client, "GET", "/", params=params)
"""

from typing import Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Le service a repondu 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre selon le header Retry-After, ou None
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Lit le header Retry-After (en secondes), None si absent ou non numerique."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def with_retry(max_attempts: int = 3, max_wait: int = 30):
    """
    Decorateur relancant une coroutine sur RateLimitError.

    Args:
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives, en secondes

    Returns:
        Decorateur tenacity; la derniere RateLimitError est relevee telle quelle
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP en relancant les reponses 429.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL (relative a base_url du client)
        max_attempts: Nombre maximum de tentatives
        **kwargs: Arguments passes a client.request()

    Returns:
        La reponse (statut 2xx)

    Raises:
        RateLimitError: 429 persistant apres toutes les tentatives
        httpx.HTTPStatusError: Autre statut d'erreur
        httpx.TransportError: Connexion impossible, timeout...
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _do_request()
