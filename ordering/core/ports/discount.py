"""
Interface port pour les politiques de remise.

Le service de commande delegue entierement le calcul de la remise a ce port ;
les variantes (montant fixe, pourcentage) sont interchangeables.
"""

from abc import ABC, abstractmethod

from ordering.core.entities.member import Member


class IDiscountPolicy(ABC):
    """
    Interface de calcul de remise.

    Une politique recoit le membre et le prix de l'article, et retourne
    le montant de la remise accordee.
    """

    @abstractmethod
    def discount(self, member: Member, price: int) -> int:
        """
        Calcule la remise accordee.

        Args :
            member : Le membre qui passe la commande
            price : Prix de l'article avant remise

        Retourne :
            Montant de la remise (0 si le membre n'est pas eligible)
        """
        ...
