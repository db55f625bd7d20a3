"""
Point d'entrée CLI de MovieLib.

Configure le logging, initialise la base et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import list_movies, refresh, scan, set_root
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="movielib",
    help="Catalogue local de films enrichi via OMDb",
)
container = Container()

# Commandes de la bibliothèque
app.command()(scan)
app.command(name="list")(list_movies)
app.command()(refresh)
app.command(name="set-root")(set_root)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration MovieLib")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"API OMDb : {'activée' if config.omdb_enabled else 'désactivée'}")
    typer.echo(f"Extensions vidéo : {', '.join(config.video_extensions)}")
    typer.echo(f"Serveur : http://{config.host}:{config.port}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieLib v{__version__}")


@app.command()
def serve(
    host: Annotated[str | None, typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[int | None, typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web MovieLib."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur http://{host}:{port}")
    uvicorn.run("movielib.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    configure_logging(container.config())

    logger.info("Démarrage de MovieLib", version=__version__)

    app()


if __name__ == "__main__":
    main()
