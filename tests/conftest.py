"""Shared pytest fixtures for checkout engine tests."""

import pytest

from grocery_checkout.checkout import CheckoutService
from grocery_checkout.discounts import BulkPrice, BuyTwoGetOneFree
from grocery_checkout.registry import DiscountRegistry

from .fixtures import BANANAS, ORANGES


@pytest.fixture
def registry():
    """Empty discount registry."""
    return DiscountRegistry()


@pytest.fixture
def standard_registry():
    """Registry with the standing banana and orange promotions."""
    return (
        DiscountRegistry()
        .register(BuyTwoGetOneFree(BANANAS))
        .register(BulkPrice(ORANGES, 3, "0.75"))
    )


@pytest.fixture
def service(standard_registry):
    return CheckoutService(standard_registry)
