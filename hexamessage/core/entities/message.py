"""
Entité message.

Un Message est immuable : ses champs sont fixés à la construction et
l'égalité ne dépend que de son identifiant.
"""

from dataclasses import dataclass, field

from hexamessage.core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Message:
    """
    Représente un message traité par le domaine.

    Attributs :
        id : Identifiant unique opaque (attribué par MessageService)
        content : Contenu du message (ne participe pas à l'identité)
    """

    id: str
    content: str = field(compare=False)

    def __post_init__(self) -> None:
        if self.id is None:
            raise InvalidArgumentError("ID cannot be null")
        if self.content is None:
            raise InvalidArgumentError("Content cannot be null")
