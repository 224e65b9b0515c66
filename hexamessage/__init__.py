"""
HexaMessage - Service de messages en architecture hexagonale.

Ce package illustre une architecture en couches ou le domaine ne depend
d'aucun framework et expose ses besoins via des ports.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, exceptions, ports, services métier)
- services/ : Couche application (cas d'utilisation, orchestration)
- infrastructure/ : Adaptateurs de stockage (implémentations des ports)
- adapters/ : Adaptateur CLI
- web/ : Adaptateur HTTP (FastAPI)
"""

__version__ = "0.1.0"
