"""
Catalog entities.

Entity representing a video file known to the library, with the metadata
guessed from its filename or fetched from OMDb.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from movielib.core.value_objects.metadata import ResolvedMetadata


@dataclass
class CatalogEntry:
    """
    A video entry of the catalog.

    Attributes:
        id: Internal database ID (assigned by the store on insert)
        title: Display title, never empty once created
        year: Release year, 0 when unknown
        poster_url: Poster image URL, empty when none
        source_filename: Raw filename the entry was created from (dedup key)
        created_at: Insertion timestamp
        updated_at: Last modification timestamp
    """

    id: Optional[int] = None
    title: str = ""
    year: int = 0
    poster_url: str = ""
    source_filename: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def apply_metadata(self, metadata: ResolvedMetadata) -> None:
        """
        Overwrite title, year and poster with resolved metadata.

        An unknown resolved year keeps the current one. An empty resolved
        title keeps the current title.
        """
        if metadata.title:
            self.title = metadata.title
        if metadata.year is not None:
            self.year = metadata.year
        self.poster_url = metadata.poster_url
