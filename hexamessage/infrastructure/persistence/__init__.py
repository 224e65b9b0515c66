"""
Implementations des repositories de HexaMessage.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine (hexamessage/core/ports/repositories.py)
- Est instancie et injecte par le Container

Usage:
    from hexamessage.infrastructure.persistence import InMemoryMessageRepository

    repo = InMemoryMessageRepository()
    repo.save(message)
"""

from hexamessage.infrastructure.persistence.in_memory_message_repository import (
    InMemoryMessageRepository,
)

__all__ = [
    "InMemoryMessageRepository",
]
