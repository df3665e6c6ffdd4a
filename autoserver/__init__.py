"""
Auto Server Management - Architecture Hexagonale

Sauvegardes periodiques d'un serveur avec retention par paliers.

Structure:
    - domain/: Coeur metier (artefacts, cycle de backup, politique de retention)
    - application/: Use cases et ports (interfaces vers l'hote)
    - infrastructure/: Adapters (fichiers, commandes, scheduler, logging)
    - presentation/: Commande /autoserver et console
"""

__version__ = "1.0.0"
