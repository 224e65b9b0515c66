"""
Exceptions du domaine.

Deux familles d'erreurs peuvent naître dans la couche domaine :
- InvalidArgumentError : violation d'un contrat de construction (erreur de programmation)
- ValidationError : règle métier violée par une donnée fournie par l'utilisateur

Les adaptateurs (HTTP, CLI) les traduisent dans leur propre représentation.
"""


class DomainError(Exception):
    """Classe de base des erreurs levées par le domaine."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(DomainError, ValueError):
    """Argument obligatoire manquant à la construction d'une entité."""


class ValidationError(DomainError):
    """Donnée utilisateur refusée par une règle métier. Corrigeable par l'appelant."""
