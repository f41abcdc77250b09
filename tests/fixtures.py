"""Shared test fixtures for consistent items and promotions across tests.

Prices match the standard fruit range:
- Bananas 0.50 (buy 2 get 1 free)
- Oranges 0.30 (3 for 0.75)
- Apples 0.60 (no promotion)
"""

from decimal import Decimal

from grocery_checkout.models import Basket, Item


def money(value: str) -> Decimal:
    return Decimal(value)


BANANAS = Item("Bananas", "0.50")
ORANGES = Item("Oranges", "0.30")
APPLES = Item("Apples", "0.60")


def basket_of(*lines: tuple) -> Basket:
    """Build a basket from (item, quantity) pairs."""
    basket = Basket()
    for item, quantity in lines:
        basket.add(item, quantity)
    return basket
