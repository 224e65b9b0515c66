"""
Implementation en memoire du repository Message.

Implemente l'interface IMessageRepository avec un dictionnaire protege par
un verrou. Le contenu est perdu a l'arret du processus : cet adapter tient
lieu de n'importe quel stockage reel.
"""

import threading
from typing import Optional

from loguru import logger

from hexamessage.core.entities.message import Message
from hexamessage.core.ports.repositories import IMessageRepository


class InMemoryMessageRepository(IMessageRepository):
    """
    Repository volatile pour les messages.

    Sur pour un acces concurrent depuis plusieurs threads (pool de workers
    FastAPI). Un save sur un id existant remplace l'entree.
    """

    def __init__(self) -> None:
        self._storage: dict[str, Message] = {}
        self._lock = threading.Lock()

    def save(self, message: Message) -> Message:
        """Stocke le message par son ID et le retourne."""
        with self._lock:
            self._storage[message.id] = message
        logger.debug("Message stocke", message_id=message.id)
        return message

    def find_by_id(self, message_id: str) -> Optional[Message]:
        """Recupere un message par son ID, None s'il est absent."""
        with self._lock:
            return self._storage.get(message_id)

    def count(self) -> int:
        """Nombre de messages stockes."""
        with self._lock:
            return len(self._storage)

    def __len__(self) -> int:
        return self.count()
