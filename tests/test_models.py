"""Tests for Item, BasketItem and Basket."""

from decimal import Decimal

import pytest

from grocery_checkout.errors import ValidationError
from grocery_checkout.models import MAX_QUANTITY, Basket, BasketItem, Item, normalize_name

from .fixtures import APPLES, BANANAS, ORANGES


class TestItem:
    def test_trims_name_and_scales_price(self) -> None:
        item = Item("  Bananas ", "0.5")
        assert item.name == "Bananas"
        assert item.unit_price == Decimal("0.50")

    def test_equality_on_name_and_price(self) -> None:
        assert Item("Bananas", "0.50") == Item("Bananas", Decimal("0.5"))
        assert Item("Bananas", "0.50") != Item("Bananas", "0.60")
        assert Item("Bananas", "0.50") != Item("bananas", "0.50")

    def test_hashable_and_consistent_with_equality(self) -> None:
        assert len({Item("Bananas", "0.50"), Item("Bananas", "0.5")}) == 1

    def test_zero_price_allowed(self) -> None:
        assert Item("Free sample", 0).unit_price == Decimal("0.00")

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_rejects_missing_name(self, name) -> None:
        with pytest.raises(ValidationError):
            Item(name, "0.50")

    def test_rejects_negative_price(self) -> None:
        with pytest.raises(ValidationError, match="negative"):
            Item("Bananas", "-0.01")

    def test_rejects_missing_price(self) -> None:
        with pytest.raises(ValidationError):
            Item("Bananas", None)

    def test_rejects_sub_penny_price(self) -> None:
        """Prices are kept as given, never rounded to the nearest penny."""
        with pytest.raises(ValidationError, match="two decimal places"):
            Item("X", "0.505")

    @pytest.mark.parametrize("price", ["1e30", Decimal("1E+28")])
    def test_rejects_out_of_range_price(self, price) -> None:
        with pytest.raises(ValidationError, match="out of range"):
            Item("Gold", price)

    def test_is_immutable(self) -> None:
        with pytest.raises(AttributeError):
            BANANAS.name = "Plantains"

    def test_key_is_normalised_name(self) -> None:
        assert Item(" BaNaNas ", "0.50").key == "bananas"


class TestNormalizeName:
    def test_case_and_whitespace_insensitive(self) -> None:
        assert normalize_name("  APPLES ") == normalize_name("apples")

    def test_none_rejected(self) -> None:
        with pytest.raises(ValidationError):
            normalize_name(None)


class TestBasketItem:
    def test_line_total(self) -> None:
        assert BasketItem(ORANGES, 4).line_total == Decimal("1.20")


class TestBasket:
    def test_starts_empty(self) -> None:
        basket = Basket()
        assert basket.is_empty()
        assert len(basket) == 0
        assert basket.items() == []

    def test_add_merges_quantities(self) -> None:
        basket = Basket()
        basket.add(BANANAS, 2)
        basket.add(BANANAS, 1)
        assert basket.quantity_of(BANANAS) == 3
        assert basket.unique_item_count == 1

    def test_default_quantity_is_one(self) -> None:
        basket = Basket()
        basket.add(APPLES)
        assert basket.quantity_of(APPLES) == 1

    def test_preserves_insertion_order(self) -> None:
        basket = Basket()
        basket.add(ORANGES, 1)
        basket.add(BANANAS, 1)
        basket.add(ORANGES, 2)
        assert [line.item for line in basket.items()] == [ORANGES, BANANAS]

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, True, "2"])
    def test_rejects_non_positive_or_non_int_quantity(self, quantity) -> None:
        basket = Basket()
        with pytest.raises(ValidationError):
            basket.add(BANANAS, quantity)
        assert basket.is_empty()

    def test_rejects_missing_item(self) -> None:
        with pytest.raises(ValidationError):
            Basket().add(None, 1)

    def test_rejects_quantity_above_maximum(self) -> None:
        basket = Basket()
        with pytest.raises(ValidationError, match="cannot exceed"):
            basket.add(BANANAS, int("9" * 28))
        assert basket.is_empty()

    def test_merged_quantity_is_capped(self) -> None:
        basket = Basket()
        basket.add(BANANAS, MAX_QUANTITY)
        with pytest.raises(ValidationError):
            basket.add(BANANAS, 1)
        assert basket.quantity_of(BANANAS) == MAX_QUANTITY

    def test_find_ignores_case(self) -> None:
        basket = Basket()
        basket.add(APPLES, 2)
        assert basket.find("  aPPLES ") == APPLES
        assert basket.find("Bananas") is None

    def test_remove_deletes_whole_entry(self) -> None:
        basket = Basket()
        basket.add(BANANAS, 5)
        assert basket.remove(BANANAS) is True
        assert BANANAS not in basket
        assert basket.quantity_of(BANANAS) == 0

    def test_remove_absent_item(self) -> None:
        assert Basket().remove(BANANAS) is False

    def test_clear(self) -> None:
        basket = Basket()
        basket.add(BANANAS, 1)
        basket.add(APPLES, 2)
        basket.clear()
        assert basket.is_empty()

    def test_totals(self) -> None:
        basket = Basket()
        basket.add(BANANAS, 3)
        basket.add(APPLES, 2)
        assert basket.total_quantity == 5
        assert basket.unique_item_count == 2

    def test_items_is_a_snapshot(self) -> None:
        basket = Basket()
        basket.add(BANANAS, 1)
        lines = basket.items()
        basket.add(APPLES, 1)
        assert len(lines) == 1

    def test_iteration_yields_lines(self) -> None:
        basket = Basket()
        basket.add(BANANAS, 2)
        assert list(basket) == [BasketItem(BANANAS, 2)]
