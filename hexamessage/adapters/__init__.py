"""
Adaptateurs d'entrée de HexaMessage.

- cli/ : Commandes Typer traduisant la ligne de commande en appels de cas d'utilisation

L'adaptateur HTTP vit dans hexamessage.web.
"""
