"""
Interface port pour le parsing de noms de fichiers.
"""

from abc import ABC, abstractmethod

from movielib.core.value_objects.parsed_info import ParsedGuess


class IFilenameParser(ABC):
    """
    Interface pour le parsing de noms de fichiers video.

    Definit le contrat pour deviner titre et annee depuis un nom de fichier.
    """

    @abstractmethod
    def parse(self, filename: str) -> ParsedGuess:
        """
        Devine titre et annee depuis un nom de fichier.

        Fonction totale : ne leve jamais d'exception.

        Args:
            filename: Nom du fichier a parser (sans le chemin)

        Retourne:
            ParsedGuess avec un titre non vide et une annee (0 si inconnue).
        """
        ...
