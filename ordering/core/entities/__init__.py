"""
Entites metier representant les concepts centraux du domaine.

Les entites sont immutables : un membre appartient a son repository et
une commande est creee une fois par demande, puis remise a l'appelant.

Exports :
- Grade : Grade du membre, determine l'eligibilite aux remises
- Member : Client avec identite et grade
- Order : Resultat d'une demande d'achat
"""

from ordering.core.entities.member import Grade, Member
from ordering.core.entities.order import Order

__all__ = [
    "Grade",
    "Member",
    "Order",
]
