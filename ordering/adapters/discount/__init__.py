"""
Politiques de remise implementant IDiscountPolicy.

Ces classes sont instanciees par le container, jamais par le service
de commande lui-meme.
"""

from ordering.adapters.discount.fix_discount_policy import FixDiscountPolicy
from ordering.adapters.discount.rate_discount_policy import RateDiscountPolicy

__all__ = [
    "FixDiscountPolicy",
    "RateDiscountPolicy",
]
