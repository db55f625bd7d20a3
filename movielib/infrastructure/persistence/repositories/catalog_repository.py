"""
Implementation SQLModel du repository du catalogue.

Implemente l'interface ICatalogRepository pour la persistance des entrees
dans la base de donnees SQLite via SQLModel.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Optional, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from movielib.core.entities.catalog import CatalogEntry
from movielib.core.errors import PersistenceError
from movielib.core.ports.repositories import ICatalogRepository
from movielib.infrastructure.persistence.models import MovieModel

T = TypeVar("T")


class SQLModelCatalogRepository(ICatalogRepository):
    """
    Repository SQLModel pour le catalogue.

    Implemente ICatalogRepository avec conversion bidirectionnelle
    entre l'entite CatalogEntry (domaine) et MovieModel (persistance).
    Chaque insertion ou mise a jour est validee immediatement (commit).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MovieModel) -> CatalogEntry:
        """Convertit un modele DB en entite domaine."""
        return CatalogEntry(
            id=model.id,
            title=model.title,
            year=model.year,
            poster_url=model.cover,
            source_filename=model.source_filename,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: CatalogEntry) -> MovieModel:
        """Convertit une entite domaine en modele DB (insertion)."""
        return MovieModel(
            title=entity.title,
            year=entity.year,
            cover=entity.poster_url,
            source_filename=entity.source_filename,
        )

    def _run(self, action: str, operation: Callable[[], T]) -> T:
        """Execute une operation DB, annule la transaction et leve PersistenceError en cas d'echec."""
        try:
            return operation()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise PersistenceError(f"failed to {action}: {e}") from e

    def count(self) -> int:
        """Retourne le nombre d'entrees du catalogue."""
        statement = select(func.count()).select_from(MovieModel)
        return self._run("count movies", lambda: self._session.exec(statement).one())

    def find_by_title(self, title: str) -> Optional[CatalogEntry]:
        """Recupere une entree par titre exact."""
        statement = select(MovieModel).where(MovieModel.title == title)
        model = self._run("check existing movie", lambda: self._session.exec(statement).first())
        return self._to_entity(model) if model else None

    def find_by_filename(self, filename: str) -> Optional[CatalogEntry]:
        """Recupere l'entree creee depuis ce nom de fichier brut."""
        statement = select(MovieModel).where(MovieModel.source_filename == filename)
        model = self._run("check existing movie", lambda: self._session.exec(statement).first())
        return self._to_entity(model) if model else None

    def get_by_id(self, entry_id: int) -> Optional[CatalogEntry]:
        """Recupere une entree par son ID."""
        model = self._run("load movie", lambda: self._session.get(MovieModel, entry_id))
        return self._to_entity(model) if model else None

    def list_all(self) -> list[CatalogEntry]:
        """Liste toutes les entrees, par ID croissant."""
        statement = select(MovieModel).order_by(MovieModel.id)
        models = self._run("list movies", lambda: self._session.exec(statement).all())
        return [self._to_entity(model) for model in models]

    def insert(self, entry: CatalogEntry) -> CatalogEntry:
        """Insere une nouvelle entree."""
        model = self._to_model(entry)

        def _insert() -> MovieModel:
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
            return model

        return self._to_entity(self._run("create movie record", _insert))

    def update(self, entry: CatalogEntry) -> CatalogEntry:
        """Met a jour titre, annee et poster d'une entree existante."""
        if entry.id is None:
            raise PersistenceError("failed to update movie: entry has no id")

        def _update() -> Optional[MovieModel]:
            existing = self._session.get(MovieModel, entry.id)
            if existing is None:
                return None
            existing.title = entry.title
            existing.year = entry.year
            existing.cover = entry.poster_url
            existing.updated_at = datetime.now(timezone.utc)
            self._session.add(existing)
            self._session.commit()
            self._session.refresh(existing)
            return existing

        model = self._run("update movie", _update)
        if model is None:
            raise PersistenceError(f"failed to update movie: no movie with id {entry.id}")
        return self._to_entity(model)
