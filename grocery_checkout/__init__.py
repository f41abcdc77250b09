"""Grocery basket pricing engine with promotional discounts."""

from .errors import (
    CheckoutError,
    ValidationError,
    EmptyBasketError,
    AggregationError,
    CatalogError,
)
from .money import (
    CURRENCY_SCALE,
    ZERO,
    to_money,
    format_money,
)
from .models import Item, BasketItem, Basket, normalize_name
from .discounts import (
    Discount,
    DiscountResult,
    BuyTwoGetOneFree,
    BulkPrice,
)
from .registry import DiscountRegistry
from .checkout import CheckoutService, CheckoutResult
from .catalog import ItemCatalog, DEFAULT_ITEMS
from .receipt import format_receipt
from .config import Settings, load_settings
from .log import configure_logging

__all__ = [
    # Errors
    "CheckoutError",
    "ValidationError",
    "EmptyBasketError",
    "AggregationError",
    "CatalogError",
    # Money
    "CURRENCY_SCALE",
    "ZERO",
    "to_money",
    "format_money",
    # Model
    "Item",
    "BasketItem",
    "Basket",
    "normalize_name",
    # Discounts
    "Discount",
    "DiscountResult",
    "BuyTwoGetOneFree",
    "BulkPrice",
    "DiscountRegistry",
    # Checkout
    "CheckoutService",
    "CheckoutResult",
    # Catalog and receipt
    "ItemCatalog",
    "DEFAULT_ITEMS",
    "format_receipt",
    # Configuration
    "Settings",
    "load_settings",
    "configure_logging",
]
