"""Item and basket data model."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterator, Optional

from .errors import ValidationError
from .money import multiply, to_money
from .validation import require_at_most, require_positive, require_present, require_text

MAX_QUANTITY = 10**9


def normalize_name(name: str) -> str:
    """Case-insensitive lookup key for an item name."""
    if name is None:
        raise ValidationError("item name is required")
    return name.strip().casefold()


@dataclass(frozen=True)
class Item:
    """A sellable item: trimmed name plus non-negative unit price.

    Two items are equal when both name and price are equal.
    """

    name: str
    unit_price: Decimal

    def __post_init__(self) -> None:
        name = require_text(self.name, "item name cannot be empty")
        require_present(self.unit_price, "item price is required")
        price = to_money(self.unit_price)
        if price < 0:
            raise ValidationError(f"item price cannot be negative: {price}")
        # frozen: bypass __setattr__ to store normalised values
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "unit_price", price)

    @property
    def key(self) -> str:
        return normalize_name(self.name)


@dataclass(frozen=True)
class BasketItem:
    """One basket line: an item and its accumulated quantity."""

    item: Item
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return multiply(self.item.unit_price, self.quantity)


class Basket:
    """Distinct items mapped to positive quantities, in insertion order."""

    def __init__(self) -> None:
        self._entries: dict[Item, int] = {}

    def __repr__(self) -> str:
        lines = ", ".join(f"{item.name} x{qty}" for item, qty in self._entries.items())
        return f"Basket({lines})"

    def add(self, item: Item, quantity: int = 1) -> None:
        """Add quantity of item, merging with an existing entry."""
        if not isinstance(item, Item):
            raise ValidationError("item is required")
        require_positive(quantity, f"quantity must be positive: {quantity!r}")
        merged = self._entries.get(item, 0) + quantity
        require_at_most(merged, MAX_QUANTITY, f"quantity cannot exceed {MAX_QUANTITY}: {merged}")
        self._entries[item] = merged

    def remove(self, item: Item) -> bool:
        """Remove the whole entry for item. Returns True if it was present."""
        return self._entries.pop(item, None) is not None

    def find(self, name: str) -> Optional[Item]:
        """Item in the basket whose name matches, ignoring case."""
        key = normalize_name(name)
        for item in self._entries:
            if item.key == key:
                return item
        return None

    def clear(self) -> None:
        self._entries.clear()

    def items(self) -> list[BasketItem]:
        """Snapshot of basket lines in insertion order."""
        return [BasketItem(item, qty) for item, qty in self._entries.items()]

    def quantity_of(self, item: Item) -> int:
        return self._entries.get(item, 0)

    def is_empty(self) -> bool:
        return not self._entries

    @property
    def total_quantity(self) -> int:
        return sum(self._entries.values())

    @property
    def unique_item_count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[BasketItem]:
        return iter(self.items())

    def __contains__(self, item: Any) -> bool:
        return item in self._entries
