"""
Couche infrastructure de HexaMessage.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Stockage des messages (dictionnaire en memoire, volatile)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation (ex: base durable au lieu de la memoire)
sans modifier la logique metier.
"""
