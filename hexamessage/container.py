"""
Container d'injection de dependances via dependency-injector.

Seul endroit qui connait les types concrets : les services du domaine
ne portent aucune annotation de framework et recoivent leurs ports
par leur constructeur.
"""

from dependency_injector import containers, providers

from .config import Settings
from .core.services.business_service import BusinessService
from .core.services.message_service import MessageService
from .infrastructure.persistence import InMemoryMessageRepository
from .services.hello import HelloUseCase
from .services.messages import CreateMessageUseCase, GetMessageUseCase


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Fournit l'injection de dependances pour les interfaces CLI et Web.

    Utilisation :
        container = Container()
        create = container.create_message_use_case()
        message = create.execute("Hello World")
        container.get_message_use_case().execute(message.id)
    """

    # Configuration - singleton charge une seule fois
    config = providers.ThreadSafeSingleton(Settings)

    # Adapter de stockage - un seul stockage par container, partage par les threads
    # du pool de workers (ThreadSafeSingleton)
    message_repository = providers.ThreadSafeSingleton(InMemoryMessageRepository)

    # Services du domaine (sans etat propre - Singletons)
    business_service = providers.ThreadSafeSingleton(BusinessService)
    message_service = providers.ThreadSafeSingleton(
        MessageService,
        repository=message_repository,
    )

    # Cas d'utilisation - Factory, une instance par appel
    hello_use_case = providers.Factory(
        HelloUseCase,
        business_service=business_service,
    )
    create_message_use_case = providers.Factory(
        CreateMessageUseCase,
        message_service=message_service,
    )
    get_message_use_case = providers.Factory(
        GetMessageUseCase,
        message_service=message_service,
    )
