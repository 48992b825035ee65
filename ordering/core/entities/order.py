"""
Entite commande.

Objet valeur construit par OrderService. La remise est toujours calculee
par la politique injectee, jamais par la commande elle-meme.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Order:
    """
    Commande d'un membre pour un article unique.

    Attributs :
        member_id : Identifiant du membre qui commande
        item_name : Nom de l'article achete
        item_price : Prix de l'article avant remise
        discount_price : Remise accordee par la politique de remise
    """

    member_id: int
    item_name: str
    item_price: int
    discount_price: int

    def calculate_price(self) -> int:
        """Retourne le prix a payer (prix de l'article moins la remise)."""
        return self.item_price - self.discount_price
