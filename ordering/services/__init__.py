"""
Couche application : cas d'utilisation orchestrant les ports du domaine.

- OrderService : Creation de commande (membre + politique de remise)
- MemberService : Inscription et recherche des membres
"""

from ordering.services.member_service import MemberService
from ordering.services.order_service import OrderService

__all__ = [
    "MemberService",
    "OrderService",
]
