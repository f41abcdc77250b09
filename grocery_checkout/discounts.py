"""Discount strategies.

Each discount targets exactly one item and computes how much to take
off a basket line for a given quantity and unit price:

- BuyTwoGetOneFree: every third unit is free.
- BulkPrice: complete groups of ``group_size`` units cost ``group_price``;
  leftover units are charged at the unit price.

A result with a zero amount means the discount did not apply.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

import structlog

from .errors import ValidationError
from .models import MAX_QUANTITY, Item
from .money import DEFAULT_CURRENCY_SYMBOL, ZERO, multiply, to_money
from .validation import (
    require_at_most,
    require_non_negative,
    require_non_negative_amount,
    require_positive,
    require_present,
)

log = structlog.get_logger(__name__)

BUY_TWO_GROUP_SIZE = 3


@dataclass(frozen=True)
class DiscountResult:
    """Outcome of applying one discount to one basket line."""

    item: Item
    description: str
    amount: Decimal
    items_affected: int

    def __post_init__(self) -> None:
        require_present(self.item, "discount result item is required")
        require_present(self.description, "discount description is required")
        require_present(self.amount, "discount amount is required")
        require_non_negative_amount(self.amount, "discount amount cannot be negative")
        require_non_negative(self.items_affected, "items affected cannot be negative")

    @property
    def applicable(self) -> bool:
        return self.amount > 0


class Discount(ABC):
    """Base class for discount strategies bound to a single item."""

    def __init__(self, item: Item) -> None:
        if not isinstance(item, Item):
            raise ValidationError("discount item is required")
        self._item = item

    @property
    def item(self) -> Item:
        """The item this discount targets."""
        return self._item

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable label for the promotion."""

    @abstractmethod
    def calculate(self, quantity: int, unit_price: Decimal) -> DiscountResult:
        """Compute the discount for quantity units at unit_price.

        Raises:
            ValidationError: If unit_price is missing or quantity is negative.
        """

    def _check_inputs(self, quantity: int, unit_price: Decimal) -> Decimal:
        require_present(unit_price, "unit price cannot be None")
        require_non_negative(quantity, f"quantity cannot be negative: {quantity!r}")
        require_at_most(quantity, MAX_QUANTITY, f"quantity cannot exceed {MAX_QUANTITY}: {quantity}")
        price = to_money(unit_price)
        require_non_negative_amount(price, f"unit price cannot be negative: {price}")
        return price

    def _not_applicable(self) -> DiscountResult:
        return DiscountResult(self._item, self.name, ZERO, 0)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._item.name!r}, {self.name!r})"


class BuyTwoGetOneFree(Discount):
    """One unit free for every three bought."""

    @property
    def name(self) -> str:
        return "Buy 2 Get 1 Free"

    def calculate(self, quantity: int, unit_price: Decimal) -> DiscountResult:
        price = self._check_inputs(quantity, unit_price)

        if quantity < BUY_TWO_GROUP_SIZE:
            log.debug("discount_not_applicable", item=self._item.name, quantity=quantity)
            return self._not_applicable()

        free_items = quantity // BUY_TWO_GROUP_SIZE
        amount = multiply(price, free_items)

        log.debug(
            "discount_calculated",
            item=self._item.name,
            quantity=quantity,
            free_items=free_items,
            amount=str(amount),
        )
        return DiscountResult(self._item, self.name, amount, free_items)


class BulkPrice(Discount):
    """``group_size`` units for ``group_price``, e.g. 3 for £0.75.

    Construction rejects a group price above the undiscounted cost of a
    group at the item's own price. The label is rendered with
    currency_symbol.
    """

    def __init__(
        self,
        item: Item,
        group_size: int,
        group_price: Decimal,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    ) -> None:
        super().__init__(item)
        require_positive(group_size, f"group size must be positive: {group_size!r}")
        require_at_most(group_size, MAX_QUANTITY, f"group size cannot exceed {MAX_QUANTITY}: {group_size}")
        require_present(group_price, "group price is required")
        price = to_money(group_price)
        require_non_negative_amount(price, f"group price cannot be negative: {price}")

        undiscounted = multiply(item.unit_price, group_size)
        if price > undiscounted:
            raise ValidationError(
                f"group price {price} exceeds undiscounted cost {undiscounted} "
                f"of {group_size} x {item.name}"
            )

        self._group_size = group_size
        self._group_price = price
        self._currency_symbol = currency_symbol
        log.debug("bulk_price_created", item=item.name, group_size=group_size, group_price=str(price))

    @property
    def group_size(self) -> int:
        return self._group_size

    @property
    def group_price(self) -> Decimal:
        return self._group_price

    @property
    def name(self) -> str:
        return f"{self._group_size} for {self._currency_symbol}{self._group_price}"

    def calculate(self, quantity: int, unit_price: Decimal) -> DiscountResult:
        price = self._check_inputs(quantity, unit_price)

        if quantity < self._group_size:
            log.debug(
                "discount_not_applicable",
                item=self._item.name,
                quantity=quantity,
                required=self._group_size,
            )
            return self._not_applicable()

        groups, remainder = divmod(quantity, self._group_size)
        cost_without = multiply(price, quantity)
        cost_with = multiply(self._group_price, groups) + multiply(price, remainder)
        amount = cost_without - cost_with

        if amount < 0:
            # unit price passed in is below the configured deal
            log.warning(
                "bulk_price_above_unit_cost",
                item=self._item.name,
                unit_price=str(price),
                group_price=str(self._group_price),
            )
            return self._not_applicable()

        log.debug(
            "discount_calculated",
            item=self._item.name,
            quantity=quantity,
            groups=groups,
            remainder=remainder,
            amount=str(amount),
        )
        return DiscountResult(self._item, self.name, amount, groups * self._group_size)
