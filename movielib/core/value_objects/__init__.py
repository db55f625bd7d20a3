"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ParsedGuess : Titre et annee devines depuis un nom de fichier
- ResolvedMetadata : Metadonnees canoniques retournees par OMDb
- LibraryConfig : Configuration explicite d'une reconciliation
"""

from movielib.core.value_objects.library_config import LibraryConfig
from movielib.core.value_objects.metadata import ResolvedMetadata
from movielib.core.value_objects.parsed_info import ParsedGuess

__all__ = [
    "LibraryConfig",
    "ParsedGuess",
    "ResolvedMetadata",
]
