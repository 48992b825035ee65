"""
Container d'injection de dependances via dependency-injector.

C'est l'assembleur de l'application : le seul endroit qui nomme les
implementations concretes des ports. Le OrderService recoit ses
collaborateurs d'ici et ne sait pas lesquels il obtient.
"""

from dependency_injector import containers, providers

from .adapters.discount import FixDiscountPolicy, RateDiscountPolicy
from .config import Settings
from .infrastructure.persistence import InMemoryMemberRepository
from .services.member_service import MemberService
from .services.order_service import OrderService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        member_service = container.member_service()
        order_service = container.order_service()

    Pour changer de politique de remise sans toucher au service :
        container.config.override(Settings(discount_policy="rate"))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Stockage des membres - partage entre tous les services
    member_repository = providers.Singleton(InMemoryMemberRepository)

    # Politique de remise - choisie par config.discount_policy
    discount_policy = providers.Selector(
        config.provided.discount_policy,
        fix=providers.Singleton(
            FixDiscountPolicy,
            discount_fix_amount=config.provided.fix_discount_amount,
        ),
        rate=providers.Singleton(
            RateDiscountPolicy,
            discount_percent=config.provided.rate_discount_percent,
        ),
    )

    # Services (sans etat) - Factory pour suivre un override des collaborateurs
    member_service = providers.Factory(
        MemberService,
        member_repository=member_repository,
    )

    order_service = providers.Factory(
        OrderService,
        member_repository=member_repository,
        discount_policy=discount_policy,
    )
