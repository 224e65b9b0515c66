"""
Schémas pydantic des requêtes et réponses HTTP.

Ils appartiennent à l'adaptateur : le domaine ne les connaît pas.
"""

from typing import Optional

from pydantic import BaseModel

from ..core.entities.message import Message


class HelloResponse(BaseModel):
    message: str


class CreateMessageRequest(BaseModel):
    # Une clé absente vaut None : le domaine la refuse comme un contenu vide
    content: Optional[str] = None


class MessageResponse(BaseModel):
    id: str
    content: str

    @classmethod
    def from_entity(cls, message: Message) -> "MessageResponse":
        return cls(id=message.id, content=message.content)


class MessageContentResponse(BaseModel):
    content: str


class ErrorResponse(BaseModel):
    detail: str
