"""
Politique de remise a montant fixe.

Les membres VIP beneficient d'une remise constante quel que soit le prix.
"""

from ordering.core.entities.member import Member
from ordering.core.ports.discount import IDiscountPolicy


# Remise par defaut accordee aux VIP
DEFAULT_FIX_AMOUNT = 1000


class FixDiscountPolicy(IDiscountPolicy):
    """
    Remise fixe pour les membres VIP.

    Example:
        policy = FixDiscountPolicy(discount_fix_amount=1000)
        policy.discount(vip_member, 20000)  # 1000
        policy.discount(basic_member, 20000)  # 0
    """

    def __init__(self, discount_fix_amount: int = DEFAULT_FIX_AMOUNT) -> None:
        """
        Initialise la politique.

        Args :
            discount_fix_amount : Montant accorde aux VIP (>= 0)
        """
        if discount_fix_amount < 0:
            raise ValueError(
                f"Le montant de remise doit etre positif: {discount_fix_amount}"
            )
        self._discount_fix_amount = discount_fix_amount

    @property
    def discount_fix_amount(self) -> int:
        return self._discount_fix_amount

    def discount(self, member: Member, price: int) -> int:
        """Retourne le montant fixe pour un VIP, 0 sinon."""
        if member.is_vip:
            return self._discount_fix_amount
        return 0
