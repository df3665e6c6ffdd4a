"""
Infrastructure Layer - Adapters pour les services externes.

Cette couche contient les implementations concretes des ports definis
dans la couche application. Elle gere les interactions avec:
- Le repertoire de backups (fichiers .vcdbs)
- Les commandes de l'hote (/save, /genbackup)
- Le planificateur (APScheduler)
- Le logging (structlog)

Le conteneur (infrastructure.container) n'est pas re-exporte ici:
il depend de la couche presentation.
"""
