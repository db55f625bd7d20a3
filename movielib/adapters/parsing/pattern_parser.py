"""
Implementation du parser de noms de fichiers par motifs.

Ce module fournit PatternFilenameParser qui implemente IFilenameParser
en essayant une liste ordonnee de motifs (regex, extracteur). Le premier
motif qui correspond l'emporte : l'ordre est une regle de priorite et
doit rester stable pour que les noms ambigus soient toujours interpretes
de la meme facon.
"""

import re
from typing import Callable, NamedTuple

from movielib.core.ports.parser import IFilenameParser
from movielib.core.value_objects.parsed_info import ParsedGuess
from movielib.utils.constants import UNKNOWN_YEAR
from movielib.utils.helpers import strip_extension

# Separateur de mots dans les noms de type "The.Matrix.1999"
_SEPARATOR = "."


class FilenamePattern(NamedTuple):
    """Motif de nom de fichier et sa fonction d'extraction."""

    name: str
    regex: re.Pattern[str]
    extract: Callable[[re.Match[str]], ParsedGuess]


def _to_year(value: str) -> int:
    """Convertit une annee capturee, 0 si la conversion echoue."""
    try:
        return int(value)
    except ValueError:
        return UNKNOWN_YEAR


def _dotted(match: re.Match[str]) -> ParsedGuess:
    """Movie.Name.2023.quality.info -> titre avec espaces."""
    return ParsedGuess(
        title=match.group(1).replace(_SEPARATOR, " "),
        year=_to_year(match.group(2)),
    )


def _delimited(match: re.Match[str]) -> ParsedGuess:
    """Movie Name [2023 ...] ou Movie Name (2023) -> titre sans espaces autour."""
    return ParsedGuess(
        title=match.group(1).strip(),
        year=_to_year(match.group(2)),
    )


# Ordre de priorite : ne pas reordonner
FILENAME_PATTERNS: tuple[FilenamePattern, ...] = (
    # Movie.Name.2023.quality.info.mkv
    FilenamePattern("dotted", re.compile(r"^(.+?)\.([0-9]{4})"), _dotted),
    # Movie Name [2023 quality info].mkv
    FilenamePattern("bracketed", re.compile(r"^(.+?)\s*\[([0-9]{4})"), _delimited),
    # Movie Name (2023).mkv
    FilenamePattern("parenthesized", re.compile(r"^(.+?)\s*\(([0-9]{4})\)"), _delimited),
)


class PatternFilenameParser(IFilenameParser):
    """
    Parser de noms de fichiers par motifs ordonnes.

    Retire l'extension puis essaie chaque motif de FILENAME_PATTERNS.
    Sans correspondance, le titre est le nom sans extension (points
    remplaces par des espaces) et l'annee est inconnue.
    """

    def __init__(
        self, patterns: tuple[FilenamePattern, ...] = FILENAME_PATTERNS
    ) -> None:
        self._patterns = patterns

    def parse(self, filename: str) -> ParsedGuess:
        """
        Devine titre et annee depuis un nom de fichier.

        Args:
            filename: Nom du fichier (ex: "The.Matrix.1999.1080p.mkv")

        Returns:
            ParsedGuess (ex: title="The Matrix", year=1999)
        """
        stem = strip_extension(filename)

        guess = self._match(stem)
        if guess is None:
            guess = ParsedGuess(title=stem.replace(_SEPARATOR, " "), year=UNKNOWN_YEAR)

        # Un titre vide (ex: fichier ".mkv") retombe sur le nom brut
        if not guess.title.strip():
            guess = ParsedGuess(title=filename, year=guess.year)

        return guess

    def _match(self, stem: str) -> ParsedGuess | None:
        """Retourne l'estimation du premier motif qui correspond, sinon None."""
        for pattern in self._patterns:
            match = pattern.regex.match(stem)
            if match:
                return pattern.extract(match)
        return None
