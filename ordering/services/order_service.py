"""
Service de creation de commandes.

Le OrderService ne depend que des ports IMemberRepository et IDiscountPolicy.
Les implementations concretes sont fournies a la construction par
l'assembleur (voir ordering.container) ; le service ne les instancie jamais.

Responsabilites:
- Resolution du membre via le repository
- Delegation du calcul de remise a la politique injectee
- Construction de la commande immutable
"""

from loguru import logger

from ordering.core.entities.order import Order
from ordering.core.exceptions import MemberNotFoundError
from ordering.core.ports.discount import IDiscountPolicy
from ordering.core.ports.repositories import IMemberRepository


class OrderService:
    """
    Service de creation de commandes.

    Sans etat : deux appels avec les memes entrees et le meme etat des
    collaborateurs produisent des commandes egales.

    Example:
        service = OrderService(
            member_repository=InMemoryMemberRepository(),
            discount_policy=FixDiscountPolicy(),
        )
        order = service.create_order(1, "laptop", 20000)
    """

    def __init__(
        self,
        member_repository: IMemberRepository,
        discount_policy: IDiscountPolicy,
    ) -> None:
        """
        Initialise le service avec ses deux collaborateurs.

        Args:
            member_repository: Port de recherche des membres
            discount_policy: Port de calcul de la remise
        """
        self._member_repository = member_repository
        self._discount_policy = discount_policy

    def create_order(self, member_id: int, item_name: str, item_price: int) -> Order:
        """
        Cree une commande pour un membre.

        Le prix n'est pas valide : un prix negatif est transmis tel quel
        a la politique de remise.

        Args:
            member_id: Identifiant du membre
            item_name: Nom de l'article
            item_price: Prix de l'article avant remise

        Returns:
            La commande avec la remise calculee par la politique

        Raises:
            MemberNotFoundError: si le membre est introuvable
        """
        member = self._member_repository.find_by_id(member_id)
        if member is None:
            logger.warning(f"Commande refusee, membre introuvable: {member_id}")
            raise MemberNotFoundError(member_id)

        discount_price = self._discount_policy.discount(member, item_price)

        order = Order(
            member_id=member_id,
            item_name=item_name,
            item_price=item_price,
            discount_price=discount_price,
        )
        logger.debug(
            "Commande creee",
            member_id=member_id,
            item_name=item_name,
            item_price=item_price,
            discount_price=discount_price,
        )
        return order
