"""
Application Layer - Contrats avec l'hote.

Cette couche contient:
    - ports/: Interfaces (abstractions) pour les adapters

Principes:
    - Depend uniquement du domaine
    - Definit les interfaces (ports) que les adapters implementent
"""

__all__ = []
