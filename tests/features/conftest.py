"""Pytest-bdd configuration and shared fixtures for checkout feature tests."""

import pytest

from grocery_checkout.catalog import ItemCatalog
from grocery_checkout.models import Basket
from grocery_checkout.registry import DiscountRegistry


@pytest.fixture
def context():
    """Shared test context for scenario state."""
    return {
        "catalog": ItemCatalog(),
        "registry": DiscountRegistry(),
        "basket": Basket(),
        "result": None,
        "error": None,
    }
