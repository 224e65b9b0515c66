"""
Couche application : cas d'utilisation exposés aux adaptateurs.

Chaque cas d'utilisation reçoit le service métier dont il a besoin et
transmet arguments et résultats sans les modifier. C'est ici que se
greffent les préoccupations transverses (journalisation, transactions,
audit, autorisations) qui ne doivent jamais fuir dans le domaine.

Aucune validation métier n'est faite dans cette couche.
"""

from hexamessage.services.hello import HelloUseCase
from hexamessage.services.messages import CreateMessageUseCase, GetMessageUseCase

__all__ = [
    "HelloUseCase",
    "CreateMessageUseCase",
    "GetMessageUseCase",
]
