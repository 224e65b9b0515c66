"""
Commandes CLI des cas d'utilisation (hello, create, get).

Les commandes n'appellent que la couche application. Les erreurs du domaine
sont traduites ici : ValidationError -> message sur stderr et code de sortie 1.
L'absence d'un message n'est pas une erreur (code 0).
"""

from typing import Annotated

import typer
from rich.markup import escape

from hexamessage.adapters.cli.helpers import console, with_container
from hexamessage.container import Container
from hexamessage.core.exceptions import ValidationError


def hello() -> None:
    """Execute la logique metier de demonstration."""
    _hello()


@with_container
def _hello(container: Container) -> None:
    console.print(container.hello_use_case().execute())


def create(
    content: Annotated[str, typer.Argument(help="Contenu du message")],
) -> None:
    """
    Cree un message et affiche son identifiant.

    Exemples:
      hexamessage create "Hello World"
    """
    _create(content)


@with_container
def _create(container: Container, content: str) -> None:
    use_case = container.create_message_use_case()
    try:
        message = use_case.execute(content)
    except ValidationError as e:
        typer.echo(f"Erreur : {e.message}", err=True)
        raise typer.Exit(code=1)

    console.print(f"[bold]id[/bold]      : {message.id}", highlight=False)
    console.print(
        f"[bold]content[/bold] : {escape(message.content)}",
        highlight=False,
        soft_wrap=True,
    )


def get(
    message_id: Annotated[str, typer.Argument(help="Identifiant du message")],
) -> None:
    """Affiche le contenu d'un message (ou 'Message not found')."""
    _get(message_id)


@with_container
def _get(container: Container, message_id: str) -> None:
    content = container.get_message_use_case().execute(message_id)
    console.print(content, markup=False, highlight=False, soft_wrap=True)
