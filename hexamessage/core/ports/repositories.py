"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(dictionnaire en mémoire, base durable, service distant...).
"""

from abc import ABC, abstractmethod
from typing import Optional

from hexamessage.core.entities.message import Message


class IMessageRepository(ABC):
    """
    Interface de stockage des messages.

    Les implémentations doivent supporter l'accès concurrent : le domaine
    ne pose aucun verrou.
    """

    @abstractmethod
    def save(self, message: Message) -> Message:
        """
        Persiste un message et retourne la version stockée.

        Les erreurs du stockage (capacité, I/O) sont propagées à l'appelant.
        """
        ...

    @abstractmethod
    def find_by_id(self, message_id: str) -> Optional[Message]:
        """Récupère un message par son ID. Retourne None s'il n'existe pas."""
        ...
