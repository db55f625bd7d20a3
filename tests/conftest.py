"""
Fixtures pytest partagees pour les tests MovieLib.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec base SQLite temporaire
- Session et repositories SQLModel sur cette base
- Mock du resolveur de metadonnees (IMetadataResolver)
- Fabrique de repertoires de bibliotheque
"""

from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from movielib.config import Settings
from movielib.core.errors import TransportError
from movielib.core.ports.metadata import IMetadataResolver
from movielib.infrastructure.persistence.database import create_db_engine, init_db
from movielib.infrastructure.persistence.repositories import (
    SQLModelCatalogRepository,
    SQLModelLibrarySettingsRepository,
)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec base SQLite temporaire.

    _env_file=None ignore le fichier .env eventuel du developpeur.
    """
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path}/test.db",
        omdb_api_key="test_key",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine(test_settings: Settings) -> Iterator[Engine]:
    """Engine SQLite avec les tables creees."""
    engine = create_db_engine(test_settings.database_url)
    resource = init_db(engine)
    next(resource)
    yield engine
    resource.close()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel sur la base de test."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def catalog_repo(session: Session) -> SQLModelCatalogRepository:
    """Repository du catalogue sur la base de test."""
    return SQLModelCatalogRepository(session)


@pytest.fixture
def settings_repo(session: Session) -> SQLModelLibrarySettingsRepository:
    """Repository des reglages sur la base de test."""
    return SQLModelLibrarySettingsRepository(session)


@pytest.fixture
def mock_resolver() -> AsyncMock:
    """
    Mock de IMetadataResolver.

    Par defaut, OMDb est injoignable (TransportError).
    Configurer resolve dans chaque test pour des comportements specifiques.
    """
    resolver = AsyncMock(spec=IMetadataResolver)
    resolver.resolve.side_effect = TransportError("connection refused")
    return resolver


@pytest.fixture
def make_library(tmp_path: Path) -> Callable[..., Path]:
    """
    Fabrique de repertoire de bibliotheque.

    Usage:
        root = make_library("The.Matrix.1999.mkv", "notes.txt", dirs=["Extras"])
    """

    def _make(*filenames: str, dirs: tuple[str, ...] | list[str] = ()) -> Path:
        root = tmp_path / "library"
        root.mkdir(exist_ok=True)
        for name in filenames:
            (root / name).touch()
        for name in dirs:
            (root / name).mkdir()
        return root

    return _make
