"""
Objet valeur pour les informations de parsing de noms de fichiers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedGuess:
    """
    Titre et annee devines depuis un nom de fichier video.

    Objet transitoire : jamais persiste tel quel, il sert a interroger
    OMDb ou, si la recherche echoue, d'enregistrement de repli.

    Attributs:
        title: Titre devine (jamais vide)
        year: Annee de sortie, 0 si inconnue
    """

    title: str
    year: int = 0
