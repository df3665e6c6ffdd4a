"""
Services du domaine.

Les services du domaine contiennent la logique metier
qui n'appartient pas naturellement a une entite specifique.
Ils sont purs et n'ont aucune dependance externe.
"""

from autoserver.domain.services.retention_policy import (
    DEFAULT_BUCKETS,
    AgeBucket,
    RetentionDecision,
    RetentionPolicy,
)

__all__ = [
    "RetentionPolicy",
    "RetentionDecision",
    "AgeBucket",
    "DEFAULT_BUCKETS",
]
