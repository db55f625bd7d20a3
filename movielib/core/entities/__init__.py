"""
Business entities representing core domain concepts.

Exports:
- CatalogEntry: A cataloged video file with its metadata
"""

from movielib.core.entities.catalog import CatalogEntry

__all__ = [
    "CatalogEntry",
]
