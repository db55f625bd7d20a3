"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .adapters.api.omdb_client import OMDbClient
from .adapters.parsing.pattern_parser import PatternFilenameParser
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelCatalogRepository,
    SQLModelLibrarySettingsRepository,
)
from .services.library import LibraryService
from .services.reconciler import LibraryReconciler


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        service = container.library_service()
        ...
        container.shutdown_resources()

    Pour les tests, surcharger la configuration :
        container.config.override(providers.Object(Settings(...)))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine SQLAlchemy - partage par toutes les sessions
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )

    # Database - Resource pour creation unique des tables
    database = providers.Resource(init_db, engine=engine)

    # Session - nouvelle session a chaque appel
    session = providers.Factory(Session, engine)

    # Adapters
    filename_parser = providers.Singleton(PatternFilenameParser)

    # Client OMDb - Singleton pour reutiliser la connexion HTTP
    # Sans cle API, le client est cree mais chaque resolve leve ConfigError
    omdb_client = providers.Singleton(
        OMDbClient,
        api_key=config.provided.omdb_api_key,
        base_url=config.provided.omdb_base_url,
        timeout=config.provided.omdb_timeout_seconds,
    )

    # Repositories - Factory pour nouvelle instance avec session fraiche
    catalog_repository = providers.Factory(
        SQLModelCatalogRepository,
        session=session,
    )
    settings_repository = providers.Factory(
        SQLModelLibrarySettingsRepository,
        session=session,
    )

    # Services - Factory car dependent des repositories (sessions fraiches)
    library_reconciler = providers.Factory(
        LibraryReconciler,
        catalog_repo=catalog_repository,
        filename_parser=filename_parser,
        metadata_resolver=omdb_client,
    )

    library_service = providers.Factory(
        LibraryService,
        reconciler=library_reconciler,
        catalog_repo=catalog_repository,
        settings_repo=settings_repository,
        settings=config,
    )
