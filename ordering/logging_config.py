"""
Configuration loguru de Ordering.

Les services emettent trois evenements metier, avec leurs champs lies
en `extra` :
- "Commande creee" (DEBUG) : member_id, item_name, item_price, discount_price
- "Membre inscrit" (DEBUG) : member_id, grade
- membre introuvable (WARNING) : commande refusee

La console affiche les messages au niveau configure ; le fichier JSON
conserve tous les evenements du package pour l'historique des commandes.
"""

import sys

from loguru import logger

from ordering.config import Settings

# Les messages de ces modules alimentent le journal des commandes
EVENT_SOURCE = "ordering"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level> {extra}"
)


def configure_logging(settings: Settings) -> None:
    """
    Remplace les handlers loguru par ceux decrits dans les Settings.

    Args:
        settings: log_level pour la console ; log_file, log_rotation_size et
            log_retention_count pour le journal JSON des evenements
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    # Journal des evenements metier : DEBUG pour garder chaque commande creee
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        filter=EVENT_SOURCE,
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )
