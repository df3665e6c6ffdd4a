"""
NotificationSink Port - Interface de diffusion des messages.
"""

from abc import ABC, abstractmethod


class NotificationSink(ABC):
    """
    Interface pour les messages vers les joueurs/operateurs.

    Les implementations possibles:
    - LoggingNotificationSink: Console/log du serveur
    - MemoryNotificationSink: Pour tests
    """

    @abstractmethod
    def broadcast(self, message: str) -> None:
        """
        Diffuse un message a tous les connectes.

        Args:
            message: Texte complet.
        """
        pass

    @abstractmethod
    def send_to(self, recipient: str, message: str) -> None:
        """
        Envoie un message a un seul destinataire.

        Args:
            recipient: Emetteur de la commande.
            message: Texte complet.
        """
        pass
