"""Mutable item catalog keyed by case-insensitive name."""

from __future__ import annotations

import threading

import structlog

from .errors import CatalogError
from .models import Item, normalize_name

log = structlog.get_logger(__name__)

DEFAULT_ITEMS = (
    Item("Bananas", "0.50"),
    Item("Oranges", "0.30"),
    Item("Apples", "0.60"),
    Item("Lemons", "0.25"),
    Item("Peaches", "0.75"),
)


class ItemCatalog:
    """Name to item directory used by the shop front and admin menu."""

    def __init__(self, items=()) -> None:
        self._items: dict[str, Item] = {}
        self._lock = threading.Lock()
        for item in items:
            self.add(item)

    @classmethod
    def with_defaults(cls) -> ItemCatalog:
        """Catalog seeded with the standard fruit range."""
        return cls(DEFAULT_ITEMS)

    def get(self, name: str) -> Item:
        """Look up an item by name, ignoring case.

        Raises:
            CatalogError: If name is None or not in the catalog.
        """
        if name is None:
            raise CatalogError("item name cannot be None")
        with self._lock:
            item = self._items.get(normalize_name(name))
        if item is None:
            raise CatalogError(f"item not found in catalog: {name}")
        return item

    def contains(self, name: str) -> bool:
        if name is None:
            raise CatalogError("item name cannot be None")
        with self._lock:
            return normalize_name(name) in self._items

    def add(self, item: Item) -> None:
        """Add a new item.

        Raises:
            CatalogError: If an item with the same name already exists.
        """
        if not isinstance(item, Item):
            raise CatalogError("item is required")
        with self._lock:
            if item.key in self._items:
                raise CatalogError(f"item already exists in catalog: {item.name}")
            self._items[item.key] = item
        log.info("catalog_item_added", item=item.name, unit_price=str(item.unit_price))

    def remove(self, name: str) -> Item:
        """Remove an item by name and return it.

        Raises:
            CatalogError: If name is None or not in the catalog.
        """
        if name is None:
            raise CatalogError("item name cannot be None")
        with self._lock:
            item = self._items.pop(normalize_name(name), None)
        if item is None:
            raise CatalogError(f"item not found in catalog: {name}")
        log.info("catalog_item_removed", item=item.name)
        return item

    def items(self) -> list[Item]:
        with self._lock:
            return list(self._items.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
