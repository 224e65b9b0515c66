"""
Utilitaires partages pour les commandes CLI de HexaMessage.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container en premier argument
"""

from functools import wraps

from rich.console import Console

from hexamessage.container import Container

console = Console()


def with_container(func):
    """
    Decorateur qui injecte un container neuf en premier argument.

    Le stockage etant volatile, chaque invocation CLI part d'un stockage vide.

    Usage:
        @with_container
        def _my_command(container, ...):
            use_case = container.hello_use_case()
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        container = Container()
        return func(container, *args, **kwargs)
    return wrapper
