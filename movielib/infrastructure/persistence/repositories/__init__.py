"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans movielib/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
- Traduit les erreurs SQLAlchemy en PersistenceError
"""

from movielib.infrastructure.persistence.repositories.catalog_repository import (
    SQLModelCatalogRepository,
)
from movielib.infrastructure.persistence.repositories.settings_repository import (
    SQLModelLibrarySettingsRepository,
)

__all__ = [
    "SQLModelCatalogRepository",
    "SQLModelLibrarySettingsRepository",
]
