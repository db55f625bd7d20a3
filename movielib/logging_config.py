"""
Mise en place de loguru a partir des Settings de MovieLib.

Deux sorties :
- stderr, au niveau MOVIELIB_LOG_LEVEL, avec les champs contextuels
  (root=..., added=...) ajoutes en fin de ligne
- MOVIELIB_LOG_FILE, en JSON avec rotation, toujours au niveau DEBUG pour
  garder le detail des scans (fichiers ignores, requetes OMDb)
"""

import sys

from loguru import logger

from movielib.config import Settings

_CONSOLE_PREFIX = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)


def _console_format(record) -> str:
    """Format console : les kwargs passes au logger s'affichent en cle=valeur."""
    if not record["extra"]:
        return _CONSOLE_PREFIX + "\n{exception}"
    fields = " ".join(f"{key}={{extra[{key}]}}" for key in record["extra"])
    return _CONSOLE_PREFIX + " <dim>" + fields + "</dim>\n{exception}"


def configure_logging(settings: Settings) -> None:
    """
    Remplace les handlers loguru par ceux decrits dans les Settings.

    Peut etre appele plusieurs fois : les handlers precedents sont retires.
    """
    logger.remove()

    logger.add(sys.stderr, level=settings.log_level.upper(), format=_console_format)

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configure", log_file=str(settings.log_file))
