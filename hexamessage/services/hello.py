"""Cas d'utilisation de salutation, délégué au BusinessService."""

from loguru import logger

from hexamessage.core.services.business_service import BusinessService


class HelloUseCase:
    """Orchestre l'appel à la logique métier pure."""

    def __init__(self, business_service: BusinessService) -> None:
        self._business_service = business_service

    def execute(self) -> str:
        logger.debug("Execution du cas d'utilisation hello")
        result = self._business_service.perform_business_logic()
        logger.info("Logique metier executee")
        return result
