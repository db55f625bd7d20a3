"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- ICatalogRepository : Stockage du catalogue de films
- ILibrarySettingsRepository : Stockage du répertoire de bibliothèque

Ports externes :
- IMetadataResolver : Recherche de métadonnées canoniques (OMDb)
- IFilenameParser : Parsing des noms de fichiers vidéo
"""

from movielib.core.ports.metadata import IMetadataResolver
from movielib.core.ports.parser import IFilenameParser
from movielib.core.ports.repositories import (
    ICatalogRepository,
    ILibrarySettingsRepository,
)

__all__ = [
    # Repositories
    "ICatalogRepository",
    "ILibrarySettingsRepository",
    # Services externes
    "IMetadataResolver",
    "IFilenameParser",
]
