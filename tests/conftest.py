"""
Fixtures pytest partagees pour les tests HexaMessage.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock du port IMessageRepository
- Repository en memoire et services du domaine
- Settings de test avec chemins temporaires
- Container DI configure pour les tests
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest

from hexamessage.config import Settings
from hexamessage.container import Container
from hexamessage.core.entities.message import Message
from hexamessage.core.ports.repositories import IMessageRepository
from hexamessage.core.services.business_service import BusinessService
from hexamessage.core.services.message_service import MessageService
from hexamessage.infrastructure.persistence import InMemoryMessageRepository


@pytest.fixture
def mock_message_repository() -> MagicMock:
    """
    Mock de IMessageRepository pour les tests.

    save retourne le message recu, find_by_id retourne None par defaut.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IMessageRepository)
    mock.save.side_effect = lambda message: message
    mock.find_by_id.return_value = None
    return mock


@pytest.fixture
def repository() -> InMemoryMessageRepository:
    """Repository en memoire vide."""
    return InMemoryMessageRepository()


@pytest.fixture
def message_service(repository: InMemoryMessageRepository) -> MessageService:
    """MessageService branche sur un repository en memoire."""
    return MessageService(repository=repository)


@pytest.fixture
def business_service() -> BusinessService:
    return BusinessService()


@pytest.fixture
def sample_message() -> Message:
    """Message deja traite, tel que stocke."""
    return Message(id="123", content="Test content")


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier de log de chaque test.
    """
    return Settings(
        app_name="HexaMessage-test",
        host="127.0.0.1",
        port=8123,
        log_level="DEBUG",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def container(test_settings: Settings) -> Iterator[Container]:
    """Container DI avec les settings de test."""
    container = Container()
    container.config.override(test_settings)
    yield container
    container.config.reset_override()
