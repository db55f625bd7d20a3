"""
Objet valeur pour les metadonnees canoniques d'un film.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ResolvedMetadata:
    """
    Metadonnees canoniques retournees par le service externe.

    Attributs:
        title: Titre officiel
        year: Annee de sortie, None si la valeur retournee n'est pas numerique
              (l'annee existante est alors conservee)
        poster_url: URL du poster, vide si aucun
    """

    title: str
    year: Optional[int] = None
    poster_url: str = ""
