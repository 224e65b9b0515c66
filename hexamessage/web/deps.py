"""
Dépendances partagées de l'application web.

Fournit aux routes les cas d'utilisation issus du Container attaché à
app.state. Les routes ne voient jamais les services métier ni le stockage.
"""

from fastapi import Request

from ..container import Container
from ..services.hello import HelloUseCase
from ..services.messages import CreateMessageUseCase, GetMessageUseCase


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_hello_use_case(request: Request) -> HelloUseCase:
    return get_container(request).hello_use_case()


def get_create_message_use_case(request: Request) -> CreateMessageUseCase:
    return get_container(request).create_message_use_case()


def get_get_message_use_case(request: Request) -> GetMessageUseCase:
    return get_container(request).get_message_use_case()
