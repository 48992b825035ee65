"""
Tests pour l'entite Order.
"""

import dataclasses

import pytest

from ordering.core.entities.order import Order


class TestOrderEntity:
    """Tests pour l'entite Order."""

    def test_order_fields(self):
        """Order conserve les quatre champs fournis."""
        order = Order(member_id=1, item_name="laptop", item_price=20000, discount_price=1000)
        assert order.member_id == 1
        assert order.item_name == "laptop"
        assert order.item_price == 20000
        assert order.discount_price == 1000

    def test_calculate_price(self):
        """calculate_price soustrait la remise du prix."""
        order = Order(member_id=1, item_name="laptop", item_price=20000, discount_price=1000)
        assert order.calculate_price() == 19000

    def test_calculate_price_without_discount(self):
        """Sans remise, le prix a payer est le prix de l'article."""
        order = Order(member_id=2, item_name="mouse", item_price=10000, discount_price=0)
        assert order.calculate_price() == 10000

    def test_order_is_immutable(self):
        """Une Order ne peut pas etre modifiee apres creation."""
        order = Order(member_id=1, item_name="laptop", item_price=20000, discount_price=1000)
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.discount_price = 0  # type: ignore[misc]
