"""Tests for ItemCatalog."""

from decimal import Decimal

import pytest

from grocery_checkout.catalog import DEFAULT_ITEMS, ItemCatalog
from grocery_checkout.errors import CatalogError
from grocery_checkout.models import Item


@pytest.fixture
def catalog():
    return ItemCatalog.with_defaults()


class TestLookup:
    def test_defaults(self, catalog) -> None:
        assert [i.name for i in catalog.items()] == [
            "Bananas",
            "Oranges",
            "Apples",
            "Lemons",
            "Peaches",
        ]
        assert len(catalog) == len(DEFAULT_ITEMS)

    def test_get_is_case_insensitive(self, catalog) -> None:
        assert catalog.get("  oRaNgEs ") == Item("Oranges", "0.30")

    def test_get_missing(self, catalog) -> None:
        with pytest.raises(CatalogError, match="not found"):
            catalog.get("Kiwis")

    def test_get_none(self, catalog) -> None:
        with pytest.raises(CatalogError):
            catalog.get(None)

    def test_contains(self, catalog) -> None:
        assert catalog.contains("APPLES")
        assert not catalog.contains("Kiwis")


class TestMaintenance:
    def test_add_and_remove(self, catalog) -> None:
        kiwi = Item("Kiwis", "0.20")
        catalog.add(kiwi)
        assert catalog.get("kiwis") is kiwi
        assert catalog.remove("KIWIS") is kiwi
        assert not catalog.contains("Kiwis")

    def test_add_duplicate_name(self, catalog) -> None:
        with pytest.raises(CatalogError, match="already exists"):
            catalog.add(Item("bananas", Decimal("0.99")))

    def test_add_requires_item(self, catalog) -> None:
        with pytest.raises(CatalogError):
            catalog.add("Kiwis")

    def test_remove_missing(self, catalog) -> None:
        with pytest.raises(CatalogError):
            catalog.remove("Kiwis")

    def test_empty_catalog(self) -> None:
        assert ItemCatalog().items() == []
