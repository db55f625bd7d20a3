"""
MovieLib - Catalogue local de films.

Ce package scanne un repertoire de videos, devine titre et annee depuis
les noms de fichiers, puis enrichit chaque entree via l'API OMDb.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, erreurs)
- services/ : Couche application (réconciliation, façade bibliothèque)
- adapters/ : Couche infrastructure (CLI, client OMDb, parsing)
- infrastructure/ : Persistance SQLite (SQLModel)
- web/ : API JSON (FastAPI)
"""

__version__ = "0.1.0"
