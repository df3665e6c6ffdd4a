"""
Exceptions metier du domaine.

Ces exceptions representent des violations des regles metier
et sont independantes de l'infrastructure.
"""

from typing import Any


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidArtifactError(DomainException):
    """Leve quand un artefact de backup est invalide."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Artefact invalide: '{value}'. "
            "L'identifiant doit etre un nom de fichier non vide.",
            code="INVALID_ARTIFACT"
        )
        self.invalid_value = value


class UnknownSubcommandError(DomainException):
    """Leve quand la commande /autoserver recoit une sous-commande inconnue."""

    VALID_SUBCOMMANDS = ("start", "stop")

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Sous-commande invalide: '{value}'. "
            f"Les sous-commandes valides sont: {', '.join(self.VALID_SUBCOMMANDS)}",
            code="INVALID_SUBCOMMAND"
        )
        self.invalid_value = value


class CommandUnavailableError(DomainException):
    """Leve quand une commande de l'hote n'est pas enregistree."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Commande introuvable: '/{name}'.",
            code="COMMAND_UNAVAILABLE"
        )
        self.name = name
