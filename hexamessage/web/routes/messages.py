"""
Routes des messages.

POST /messages crée un message, GET /messages/{id} lit son contenu.
Un message absent n'est pas une erreur HTTP : le contenu par défaut est
retourné avec un statut 200. Les erreurs de validation sont traduites en 400
par le handler déclaré dans app.py.
"""

from fastapi import APIRouter, Depends

from ...services.messages import CreateMessageUseCase, GetMessageUseCase
from ..deps import get_create_message_use_case, get_get_message_use_case
from ..schemas import (
    CreateMessageRequest,
    ErrorResponse,
    MessageContentResponse,
    MessageResponse,
)

router = APIRouter(prefix="/messages")


@router.post(
    "",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
)
def create_message(
    payload: CreateMessageRequest,
    use_case: CreateMessageUseCase = Depends(get_create_message_use_case),
) -> MessageResponse:
    """Crée un message à partir du contenu fourni."""
    message = use_case.execute(payload.content)
    return MessageResponse.from_entity(message)


@router.get("/{message_id}", response_model=MessageContentResponse)
def get_message(
    message_id: str,
    use_case: GetMessageUseCase = Depends(get_get_message_use_case),
) -> MessageContentResponse:
    """Retourne le contenu d'un message, ou 'Message not found'."""
    return MessageContentResponse(content=use_case.execute(message_id))
