"""
Presentation Layer - Interface avec l'hote.

    - commands/: Commande /autoserver
    - console: Boucle de lecture des commandes (python -m autoserver)
"""

__all__ = []
