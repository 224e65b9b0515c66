"""
Point d'entrée CLI de HexaMessage.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from . import __version__
from .adapters.cli import create, get, hello
from .config import Settings
from .container import Container
from .logging_config import configure_logging, console_level_for

app = typer.Typer(
    name="hexamessage",
    help="Service de messages en architecture hexagonale",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """HexaMessage - Service de messages."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose

    if quiet or verbose:
        settings = get_config()
        configure_logging(
            settings,
            console_level=console_level_for(settings.log_level, verbose, quiet),
        )


# Monter les commandes des cas d'utilisation
app.command()(hello)
app.command()(create)
app.command()(get)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def config() -> None:
    """Affiche la configuration actuelle."""
    settings = get_config()
    typer.echo(f"Application : {settings.app_name}")
    typer.echo(f"Serveur : {settings.host}:{settings.port}")
    typer.echo(f"Niveau de log : {settings.log_level}")
    typer.echo(f"Fichier de log : {settings.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"HexaMessage v{__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web HexaMessage."""
    import uvicorn

    settings = get_config()
    host = host or settings.host
    port = port or settings.port

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("hexamessage.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(settings)

    logger.info("Démarrage de HexaMessage", version=__version__)

    app()


if __name__ == "__main__":
    main()
