"""Registry of active discounts.

Discounts are kept in registration order. Multiple discounts may target
the same item and are all applied independently. Writers are serialised
by a lock and every read returns a snapshot copy, so checkouts can run
while an admin edits promotions.
"""

from __future__ import annotations

import threading

import structlog

from .discounts import Discount
from .errors import ValidationError
from .models import Item, normalize_name

log = structlog.get_logger(__name__)


class DiscountRegistry:
    """Ordered, thread-safe collection of discounts."""

    def __init__(self) -> None:
        self._discounts: list[Discount] = []
        self._lock = threading.RLock()

    def register(self, discount: Discount) -> DiscountRegistry:
        """Append a discount. Returns self for chaining."""
        if not isinstance(discount, Discount):
            raise ValidationError("discount is required")
        with self._lock:
            self._discounts.append(discount)
        log.info("discount_registered", item=discount.item.name, discount=discount.name)
        return self

    def unregister_by_item(self, name: str) -> int:
        """Remove every discount whose target item name matches (case-insensitive).

        Returns:
            Number of discounts removed.
        """
        key = normalize_name(name)
        with self._lock:
            kept = [d for d in self._discounts if d.item.key != key]
            removed = len(self._discounts) - len(kept)
            self._discounts = kept
        log.info("discounts_unregistered", item=name, removed=removed)
        return removed

    def all_targeting(self, item: Item) -> list[Discount]:
        """Discounts whose target equals item, in registration order."""
        return [d for d in self.all() if d.item == item]

    def all(self) -> list[Discount]:
        """Snapshot of all registered discounts."""
        with self._lock:
            return list(self._discounts)

    def find_by_description(self, text: str) -> list[Discount]:
        """Discounts whose label contains text, ignoring case."""
        needle = text.casefold()
        return [d for d in self.all() if needle in d.name.casefold()]

    def clear(self) -> None:
        with self._lock:
            self._discounts.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._discounts)
