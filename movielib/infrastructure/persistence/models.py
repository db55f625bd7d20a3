"""
Modeles SQLModel pour la base de donnees MovieLib.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- movies: Catalogue des fichiers video avec leurs metadonnees
- settings: Repertoire de bibliotheque (une seule ligne)
"""

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MovieModel(SQLModel, table=True):
    """
    Modele representant une entree du catalogue.

    source_filename conserve le nom de fichier brut ayant cree l'entree :
    c'est la cle de deduplication lors des scans.
    """

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    year: int = Field(default=0)  # 0 = inconnue
    cover: str = Field(default="")  # URL du poster, vide si aucun
    source_filename: str | None = Field(default=None, index=True)
    created_at: datetime | None = Field(default_factory=_utcnow)
    updated_at: datetime | None = Field(default_factory=_utcnow)


class SettingsModel(SQLModel, table=True):
    """Modele representant les reglages de l'application (repertoire de bibliotheque)."""

    __tablename__ = "settings"

    id: int | None = Field(default=None, primary_key=True)
    lib_path: str
    created_at: datetime | None = Field(default_factory=_utcnow)
    updated_at: datetime | None = Field(default_factory=_utcnow)
