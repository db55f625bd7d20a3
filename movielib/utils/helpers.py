"""
Fonctions utilitaires pour la manipulation des noms de fichiers.
"""


def file_extension(filename: str) -> str:
    """
    Retourne l'extension d'un nom de fichier, point inclus.

    L'extension commence au dernier point du nom. Un nom sans point
    n'a pas d'extension.

    Exemples:
        >>> file_extension("The.Matrix.1999.mkv")
        '.mkv'
        >>> file_extension("README")
        ''
    """
    dot = filename.rfind(".")
    if dot < 0:
        return ""
    return filename[dot:]


def strip_extension(filename: str) -> str:
    """Retourne le nom de fichier sans son extension."""
    extension = file_extension(filename)
    if not extension:
        return filename
    return filename[: -len(extension)]
