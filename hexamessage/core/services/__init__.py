"""
Services métier du domaine.

Ils portent les règles métier et ne dépendent que des ports qu'ils déclarent.
Aucun framework n'est importé ici : le câblage est fait par le Container.

Exports:
- MessageService: Création et lecture des messages via IMessageRepository
- BusinessService: Logique métier pure, sans port
"""

from hexamessage.core.services.business_service import BusinessService
from hexamessage.core.services.message_service import (
    CONTENT_PREFIX,
    NOT_FOUND_MESSAGE,
    MessageService,
)

__all__ = [
    "BusinessService",
    "MessageService",
    "CONTENT_PREFIX",
    "NOT_FOUND_MESSAGE",
]
