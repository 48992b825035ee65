"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de stockage
- IMemberRepository : Stockage et recherche des membres

Ports politique : Contrats de calcul
- IDiscountPolicy : Calcul de la remise pour un membre et un prix
"""

from ordering.core.ports.repositories import IMemberRepository
from ordering.core.ports.discount import IDiscountPolicy

__all__ = [
    # Repositories
    "IMemberRepository",
    # Politiques
    "IDiscountPolicy",
]
