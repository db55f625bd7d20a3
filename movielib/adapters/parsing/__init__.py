"""
Adaptateurs de parsing des noms de fichiers video.
"""

from movielib.adapters.parsing.pattern_parser import PatternFilenameParser

__all__ = ["PatternFilenameParser"]
