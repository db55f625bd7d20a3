"""
Couche application (cas d'utilisation, orchestration).

- reconciler : scan d'un repertoire et rafraichissement d'une entree
- library : facade utilisee par l'API web et le CLI
"""

from movielib.services.library import LibraryService
from movielib.services.reconciler import LibraryReconciler, ReconcileReport, UnresolvedFile

__all__ = [
    "LibraryReconciler",
    "LibraryService",
    "ReconcileReport",
    "UnresolvedFile",
]
