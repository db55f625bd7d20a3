"""
Clients API externes pour l'enrichissement des metadonnees.

Ce module fournit l'adaptateur OMDb (Open Movie Database) et
l'infrastructure de retry partagee:
- RateLimitError: Exception pour les erreurs 429
- with_retry: Decorateur avec backoff exponentiel
- request_with_retry: Requete httpx relancee sur 429

Le client implemente IMetadataResolver defini dans core/ports/metadata.py.
"""

from movielib.adapters.api.omdb_client import OMDbClient
from movielib.adapters.api.retry import RateLimitError, request_with_retry, with_retry

__all__ = [
    "OMDbClient",
    "RateLimitError",
    "with_retry",
    "request_with_retry",
]
