"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Client OMDb (httpx + retry tenacity)
- parsing/ : Parsing de noms de fichiers par motifs
- cli/ : Interface ligne de commande (Typer)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from movielib.adapters.api.omdb_client import OMDbClient
from movielib.adapters.parsing.pattern_parser import PatternFilenameParser

__all__ = [
    "OMDbClient",
    "PatternFilenameParser",
]
