"""
Politique de remise proportionnelle au prix.

Les membres VIP beneficient d'un pourcentage du prix de l'article.
Le resultat est tronque vers zero (un prix negatif donne une remise
negative de meme valeur absolue qu'un prix positif).
"""

from ordering.core.entities.member import Member
from ordering.core.ports.discount import IDiscountPolicy


DEFAULT_DISCOUNT_PERCENT = 10


class RateDiscountPolicy(IDiscountPolicy):
    """
    Remise en pourcentage pour les membres VIP.

    Example:
        policy = RateDiscountPolicy(discount_percent=10)
        policy.discount(vip_member, 10000)  # 1000
    """

    def __init__(self, discount_percent: int = DEFAULT_DISCOUNT_PERCENT) -> None:
        """
        Initialise la politique.

        Args :
            discount_percent : Pourcentage accorde aux VIP (0 a 100)
        """
        if not 0 <= discount_percent <= 100:
            raise ValueError(
                f"Le pourcentage doit etre compris entre 0 et 100: {discount_percent}"
            )
        self._discount_percent = discount_percent

    @property
    def discount_percent(self) -> int:
        return self._discount_percent

    def discount(self, member: Member, price: int) -> int:
        """Retourne price * pourcentage / 100 pour un VIP, 0 sinon."""
        if member.is_vip:
            amount = abs(price) * self._discount_percent // 100
            return amount if price >= 0 else -amount
        return 0
