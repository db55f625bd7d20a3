"""
Constantes globales pour MovieLib.

Ce module contient les constantes utilisees dans l'application:
- Extensions video reconnues par defaut lors du scan
- Valeurs sentinelles de l'API OMDb
"""

# Extensions video reconnues par defaut (surchargeable via MOVIELIB_VIDEO_EXTENSIONS)
DEFAULT_VIDEO_EXTENSIONS: tuple[str, ...] = (".mkv", ".avi", ".mp4")

# Annee inconnue
UNKNOWN_YEAR = 0

# Valeur retournee par OMDb quand un champ est absent (ex: pas de poster)
OMDB_NOT_AVAILABLE = "N/A"
