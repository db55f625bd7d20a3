"""
Module de persistance SQLite pour MovieLib.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine SQLite, sessions, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports ICatalogRepository et
  ILibrarySettingsRepository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from movielib.infrastructure.persistence import create_db_engine, init_db

    engine = create_db_engine("sqlite:///movs.db")
    resource = init_db(engine)
    next(resource)  # Cree les tables si necessaire
"""

from movielib.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
)
from movielib.infrastructure.persistence.models import MovieModel, SettingsModel

__all__ = [
    "create_db_engine",
    "init_db",
    "MovieModel",
    "SettingsModel",
]
