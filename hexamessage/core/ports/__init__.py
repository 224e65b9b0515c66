"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IMessageRepository : Stockage des messages
"""

from hexamessage.core.ports.repositories import IMessageRepository

__all__ = [
    "IMessageRepository",
]
