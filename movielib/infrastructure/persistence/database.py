"""
Configuration de la base de donnees SQLite pour MovieLib.

Ce module fournit :
- Creation de l'engine SQLite, configure pour un usage multi-thread
- Fonction d'initialisation des tables

L'URL de la base est configuree via MOVIELIB_DATABASE_URL (defaut: sqlite:///movs.db).
L'engine est un singleton du Container DI, pas un etat global du module.
"""

from collections.abc import Generator
from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine


def create_db_engine(database_url: str) -> Engine:
    """
    Cree l'engine SQLAlchemy pour l'URL donnee.

    Cree le repertoire parent si l'URL designe un fichier SQLite.

    Args:
        database_url: URL SQLAlchemy (ex: sqlite:///movs.db)

    Returns:
        Engine connecte a la base
    """
    if database_url.startswith("sqlite:///") and not database_url.startswith(
        "sqlite:///:memory:"
    ):
        db_path = Path(database_url.replace("sqlite:///", "", 1))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> Generator[None, None, None]:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables manquantes. Ecrit comme un
    generateur pour servir de providers.Resource dans le Container : le
    pool de connexions est libere a l'arret.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from movielib.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug("Base de donnees initialisee", url=str(engine.url))
    try:
        yield
    finally:
        engine.dispose()
