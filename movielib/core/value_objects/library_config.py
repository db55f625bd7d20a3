"""
Configuration explicite d'une reconciliation de bibliotheque.

Construite a chaque appel par la facade LibraryService a partir du
repertoire enregistre et des Settings, puis passee au reconciliateur.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from movielib.utils.constants import DEFAULT_VIDEO_EXTENSIONS


@dataclass(frozen=True)
class LibraryConfig:
    """
    Parametres d'un scan de bibliotheque.

    Attributs:
        root: Repertoire a scanner (non recursif)
        video_extensions: Extensions acceptees, en minuscules avec le point
        timeout_seconds: Duree maximale du scan; au-dela, le scan s'arrete
                         avant l'entree suivante
    """

    root: Path
    video_extensions: frozenset[str] = field(
        default_factory=lambda: frozenset(DEFAULT_VIDEO_EXTENSIONS)
    )
    timeout_seconds: Optional[float] = None

    def accepts(self, extension: str) -> bool:
        """Indique si une extension (quelle que soit sa casse) est une video."""
        return extension.lower() in self.video_extensions
