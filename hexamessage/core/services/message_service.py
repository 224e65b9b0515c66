"""
Service métier des messages.

Le MessageService centralise les règles de création et de lecture des
messages. Il ne connaît le stockage qu'au travers du port IMessageRepository
injecté à la construction.

Règles :
- Un contenu None, vide ou composé uniquement d'espaces est refusé
- Le contenu stocké est préfixé par "Processed: " (contenu original, non tronqué)
- Chaque message reçoit un UUID4 sous forme de chaîne
- Un message absent n'est pas une erreur : un texte par défaut est retourné
"""

import uuid
from typing import Optional

from hexamessage.core.entities.message import Message
from hexamessage.core.exceptions import ValidationError
from hexamessage.core.ports.repositories import IMessageRepository


CONTENT_PREFIX = "Processed: "

# Indiscernable d'un message stocké avec ce même contenu
NOT_FOUND_MESSAGE = "Message not found"


class MessageService:
    """
    Service de création et de lecture des messages.

    Example:
        service = MessageService(repository=InMemoryMessageRepository())
        message = service.create_message("Hello World")
        service.get_message(message.id)  # "Processed: Hello World"
    """

    def __init__(self, repository: IMessageRepository) -> None:
        """
        Initialise le service.

        Args:
            repository: Implémentation du port de stockage (non possédée par le service)
        """
        self._repository = repository

    def create_message(self, content: Optional[str]) -> Message:
        """
        Valide, transforme puis persiste un nouveau message.

        Args:
            content: Contenu brut fourni par l'appelant

        Returns:
            Le message tel que retourné par le repository

        Raises:
            ValidationError: Si le contenu est None ou vide après strip()
        """
        if content is None or not content.strip():
            raise ValidationError("content cannot be empty")

        message = Message(id=str(uuid.uuid4()), content=CONTENT_PREFIX + content)
        return self._repository.save(message)

    def get_message(self, message_id: str) -> str:
        """
        Retourne le contenu d'un message, ou NOT_FOUND_MESSAGE s'il est absent.

        Ne lève jamais d'exception pour un identifiant inconnu.
        """
        message = self._repository.find_by_id(message_id)
        if message is None:
            return NOT_FOUND_MESSAGE
        return message.content
