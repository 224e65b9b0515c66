"""
Cas d'utilisation des messages (création et lecture).

Les deux cas d'utilisation enveloppent MessageService. Les erreurs du domaine
ou de l'adaptateur de stockage sont journalisées puis propagées telles quelles :
la traduction (code HTTP, code de sortie CLI) est la responsabilité de
l'adaptateur appelant.
"""

from typing import Optional

from loguru import logger

from hexamessage.core.entities.message import Message
from hexamessage.core.exceptions import ValidationError
from hexamessage.core.services.message_service import MessageService


class CreateMessageUseCase:
    """
    Création d'un message.

    Example:
        use_case = CreateMessageUseCase(message_service=service)
        message = use_case.execute("Hello World")
    """

    def __init__(self, message_service: MessageService) -> None:
        self._message_service = message_service

    def execute(self, content: Optional[str]) -> Message:
        """
        Crée un message via le service métier.

        Raises:
            ValidationError: Contenu refusé par le domaine (propagée)
        """
        logger.debug("Creation d'un message", length=len(content) if content else 0)
        try:
            message = self._message_service.create_message(content)
        except ValidationError as e:
            logger.info("Message refuse", reason=e.message)
            raise
        except Exception:
            logger.exception("Echec de la creation du message")
            raise

        logger.info("Message cree", message_id=message.id)
        return message


class GetMessageUseCase:
    """Lecture du contenu d'un message. L'absence est une valeur, pas une erreur."""

    def __init__(self, message_service: MessageService) -> None:
        self._message_service = message_service

    def execute(self, message_id: str) -> str:
        logger.debug("Lecture d'un message", message_id=message_id)
        content = self._message_service.get_message(message_id)
        logger.info("Message lu", message_id=message_id)
        return content
