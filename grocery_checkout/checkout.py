"""Checkout aggregation: subtotal, applicable discounts and total."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import structlog

from .discounts import DiscountResult
from .errors import AggregationError, CheckoutError, EmptyBasketError, ValidationError
from .models import Basket
from .money import ZERO, total
from .registry import DiscountRegistry

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    """Price breakdown for one basket.

    ``total == subtotal - total_discount``; discounts are listed in the
    order they were found (basket order, then registry order).
    """

    subtotal: Decimal
    discounts: tuple[DiscountResult, ...]
    total: Decimal

    @property
    def total_discount(self) -> Decimal:
        return total(d.amount for d in self.discounts)

    @property
    def has_discounts(self) -> bool:
        return bool(self.discounts)


class CheckoutService:
    """Prices baskets against a discount registry.

    Stateless apart from the registry it reads; safe to call from many
    threads as long as each call gets its own basket.
    """

    def __init__(self, registry: DiscountRegistry) -> None:
        if not isinstance(registry, DiscountRegistry):
            raise ValidationError("discount registry is required")
        self._registry = registry

    @property
    def registry(self) -> DiscountRegistry:
        return self._registry

    def process_checkout(self, basket: Basket) -> CheckoutResult:
        """Price basket and apply every applicable discount.

        Raises:
            ValidationError: If basket is None.
            EmptyBasketError: If basket has no entries.
            AggregationError: On any unexpected failure while pricing.
        """
        if basket is None:
            raise ValidationError("basket cannot be None")
        if basket.is_empty():
            log.warning("checkout_empty_basket")
            raise EmptyBasketError()

        lines = basket.items()
        log.info("checkout_started", unique_items=len(lines))

        try:
            subtotal = ZERO
            applied: list[DiscountResult] = []

            for line in lines:
                line_cost = line.line_total
                subtotal += line_cost
                log.debug(
                    "line_priced",
                    item=line.item.name,
                    quantity=line.quantity,
                    unit_price=str(line.item.unit_price),
                    line_cost=str(line_cost),
                )

                for discount in self._registry.all_targeting(line.item):
                    result = discount.calculate(line.quantity, line.item.unit_price)
                    if result.applicable:
                        applied.append(result)
                        log.info(
                            "discount_applied",
                            item=line.item.name,
                            discount=result.description,
                            amount=str(result.amount),
                        )

            total_discount = total(d.amount for d in applied)
            grand_total = subtotal - total_discount
        except CheckoutError:
            raise
        except Exception as e:
            log.error("checkout_failed", error=str(e))
            raise AggregationError(e) from e

        log.info(
            "checkout_processed",
            subtotal=str(subtotal),
            total_discount=str(total_discount),
            total=str(grand_total),
        )
        return CheckoutResult(subtotal=subtotal, discounts=tuple(applied), total=grand_total)
