"""
Commandes CLI de la bibliotheque : scan, liste, rafraichissement, repertoire.
"""

import asyncio
from typing import Annotated

import typer
from rich.table import Table

from movielib.adapters.cli.helpers import console, suppress_loguru, with_container
from movielib.core.errors import (
    EntryNotFoundError,
    InvalidLibraryRootError,
    MovieLibError,
    NotConfiguredError,
)

_SETUP_HINT = "[dim]Configurez-le avec : movielib set-root CHEMIN[/dim]"


def _fail(message: str, hint: str | None = None) -> None:
    """Affiche une erreur et termine la commande avec le code 1."""
    console.print(f"[red]Erreur:[/red] {message}")
    if hint:
        console.print(hint)
    raise typer.Exit(code=1)


def scan() -> None:
    """Scanne le repertoire de la bibliotheque et ajoute les nouveaux films."""
    asyncio.run(_scan_async())


@with_container()
async def _scan_async(container) -> None:
    """Implementation async de la commande scan."""
    service = container.library_service()

    try:
        with console.status("[cyan]Scan de la bibliotheque..."):
            report = await service.rescan()
    except NotConfiguredError:
        _fail("aucun repertoire de bibliotheque configure.", _SETUP_HINT)
    except MovieLibError as e:
        _fail(str(e))

    console.print(
        f"[bold green]{report.added}[/bold green] film(s) ajoute(s), "
        f"{report.skipped} deja catalogue(s)"
    )

    if report.unresolved:
        table = Table(title="Sans metadonnees OMDb (titre devine conserve)")
        table.add_column("Fichier", style="cyan")
        table.add_column("Erreur", style="yellow")
        for item in report.unresolved:
            table.add_row(item.filename, item.error)
        console.print(table)


def list_movies() -> None:
    """Affiche le catalogue (lance le premier scan si le catalogue est vide)."""
    asyncio.run(_list_async())


@with_container()
async def _list_async(container) -> None:
    """Implementation async de la commande list."""
    service = container.library_service()

    try:
        with suppress_loguru():
            entries = await service.list_library()
    except NotConfiguredError:
        _fail("aucun repertoire de bibliotheque configure.", _SETUP_HINT)
    except MovieLibError as e:
        _fail(str(e))

    if not entries:
        console.print("[yellow]Catalogue vide.[/yellow]")
        return

    table = Table(title=f"Bibliotheque ({len(entries)} films)")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Poster")
    for entry in entries:
        table.add_row(
            str(entry.id),
            entry.title,
            str(entry.year) if entry.year else "-",
            "oui" if entry.poster_url else "-",
        )
    console.print(table)


def refresh(
    movie_id: Annotated[int, typer.Argument(help="ID du film a rafraichir")],
) -> None:
    """Relance la recherche OMDb pour un film du catalogue."""
    asyncio.run(_refresh_async(movie_id))


@with_container()
async def _refresh_async(container, movie_id: int) -> None:
    """Implementation async de la commande refresh."""
    service = container.library_service()

    try:
        entry = await service.refresh(movie_id)
    except EntryNotFoundError:
        _fail(f"aucun film avec l'ID {movie_id}.")
    except MovieLibError as e:
        _fail(str(e))

    year = f" ({entry.year})" if entry.year else ""
    console.print(f"[green]Mis a jour:[/green] {entry.title}{year}")
    if entry.poster_url:
        console.print(f"[dim]Poster: {entry.poster_url}[/dim]")


def set_root(
    path: Annotated[str, typer.Argument(help="Repertoire contenant les films")],
) -> None:
    """Definit le repertoire de la bibliotheque."""
    asyncio.run(_set_root_async(path))


@with_container()
async def _set_root_async(container, path: str) -> None:
    """Implementation async de la commande set-root."""
    service = container.library_service()

    try:
        saved = service.set_library_root(path)
    except InvalidLibraryRootError as e:
        _fail(str(e))
    except MovieLibError as e:
        _fail(str(e))

    console.print(f"[green]Repertoire de bibliotheque:[/green] {saved}")
