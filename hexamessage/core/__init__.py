"""
Couche domaine (core).

Contient l'entité métier, les exceptions du domaine, les ports (interfaces
abstraites) et les services métier.
Cette couche n'a AUCUNE dépendance vers l'application, l'infrastructure
ou un framework (FastAPI, Typer, pydantic, loguru...).

Sous-packages :
- entities/ : Entités métier (Message)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- services/ : Services métier (MessageService, BusinessService)
"""
