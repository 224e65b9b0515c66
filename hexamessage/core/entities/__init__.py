"""
Business entities representing core domain concepts.

Entities are immutable objects whose identity is carried by their id.

Exports:
- Message: A processed message, append-only once persisted
"""

from hexamessage.core.entities.message import Message

__all__ = [
    "Message",
]
