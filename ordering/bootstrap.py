"""
Point d'entree de l'application.

Construit le container DI et configure le logging a partir des Settings.
"""

from typing import Optional

from dependency_injector import providers
from loguru import logger

from . import __version__
from .config import Settings
from .container import Container
from .logging_config import configure_logging


def bootstrap(
    settings: Optional[Settings] = None,
    configure_logs: bool = True,
) -> Container:
    """
    Assemble l'application.

    Args:
        settings: Parametres a utiliser a la place de ceux charges depuis
            l'environnement (utile pour les tests)
        configure_logs: Si False, laisse la configuration loguru intacte

    Returns:
        Le container pret a fournir les services
    """
    container = Container()
    if settings is not None:
        container.config.override(providers.Object(settings))

    settings = container.config()
    if configure_logs:
        configure_logging(settings)

    logger.info(
        "Demarrage de Ordering",
        version=__version__,
        discount_policy=settings.discount_policy,
    )
    return container
