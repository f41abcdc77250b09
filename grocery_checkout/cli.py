"""Interactive shop-front and admin menu.

Usage:
    grocery-checkout [--log-level LEVEL] [--json-logs]
    python -m grocery_checkout [--log-level LEVEL] [--json-logs]
"""

from __future__ import annotations

import argparse
import hmac
import sys
from typing import Optional, TextIO

import structlog

from .catalog import ItemCatalog
from .checkout import CheckoutService
from .config import APP_NAME, LOG_LEVELS, Settings, load_settings
from .discounts import BulkPrice, BuyTwoGetOneFree
from .errors import CatalogError, CheckoutError, ValidationError
from .log import configure_logging
from .models import Basket, Item
from .money import DEFAULT_CURRENCY_SYMBOL, format_money
from .receipt import format_receipt
from .registry import DiscountRegistry

log = structlog.get_logger(__name__)

MAX_ADMIN_ATTEMPTS = 3

# Main menu option codes.
MAIN_OPT_ADD_ITEM = "1"
MAIN_OPT_REMOVE_ITEM = "2"
MAIN_OPT_VIEW_BASKET = "3"
MAIN_OPT_CHECKOUT = "4"
MAIN_OPT_CLEAR = "5"
MAIN_OPT_ADMIN_MENU = "6"
MAIN_OPT_EXIT = "7"

# Admin menu option codes.
ADMIN_OPT_ADD_CATALOG = "1"
ADMIN_OPT_REMOVE_CATALOG = "2"
ADMIN_OPT_ADD_DISCOUNT = "3"
ADMIN_OPT_REMOVE_DISCOUNTS = "4"
ADMIN_OPT_LIST_DISCOUNTS = "5"
ADMIN_OPT_VIEW_CATALOG = "6"
ADMIN_OPT_BACK = "7"

DISCOUNT_TYPE_BUY_TWO = "1"
DISCOUNT_TYPE_BULK = "2"

MAIN_MENU = """
--- Options ---
1. Add item to basket
2. Remove item from basket
3. View basket
4. Checkout
5. Clear basket
6. Admin menu
7. Exit"""

ADMIN_MENU = """
--- Admin Options ---
1. Add catalog item
2. Remove catalog item
3. Add discount
4. Remove discounts for item
5. List discounts
6. View catalog items
7. Back"""


class EndOfInput(Exception):
    """Input stream closed while a prompt was waiting."""


def default_registry(
    catalog: ItemCatalog, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> DiscountRegistry:
    """Registry with the standing promotions on bananas and oranges."""
    registry = DiscountRegistry()
    registry.register(BuyTwoGetOneFree(catalog.get("Bananas")))
    registry.register(BulkPrice(catalog.get("Oranges"), 3, "0.75", currency_symbol))
    return registry


class CheckoutApp:
    """Menu-driven checkout session over a pair of text streams."""

    def __init__(
        self,
        settings: Settings,
        catalog: Optional[ItemCatalog] = None,
        registry: Optional[DiscountRegistry] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.settings = settings
        self.catalog = catalog if catalog is not None else ItemCatalog.with_defaults()
        if registry is None:
            registry = default_registry(self.catalog, settings.currency_symbol)
        self.registry = registry
        self.service = CheckoutService(self.registry)
        self.basket = Basket()
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    # ------------------------------------------------------------------
    # I/O
    # ------------------------------------------------------------------

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EndOfInput()
        return line.strip()

    def _money(self, amount) -> str:
        return format_money(amount, self.settings.currency_symbol)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Run the session until the user exits or input ends."""
        log.info("app_started", app=APP_NAME)
        self._say(f"\n=== {APP_NAME} ===")
        self._print_offers()

        handlers = {
            MAIN_OPT_ADD_ITEM: self.add_item,
            MAIN_OPT_REMOVE_ITEM: self.remove_item,
            MAIN_OPT_VIEW_BASKET: self.view_basket,
            MAIN_OPT_CHECKOUT: self.checkout,
            MAIN_OPT_CLEAR: self.clear_basket,
            MAIN_OPT_ADMIN_MENU: self.admin_menu,
        }

        try:
            while True:
                self._say(MAIN_MENU)
                choice = self._ask("Choose an option: ")
                if choice == MAIN_OPT_EXIT:
                    break
                handler = handlers.get(choice)
                if handler is None:
                    self._say("Invalid option. Please try again.")
                    log.warning("invalid_menu_option", choice=choice)
                    continue
                handler()
        except EndOfInput:
            log.info("input_closed")

        self._say("Thank you for using Grocery Checkout System. Goodbye!")
        log.info("app_closed")
        return 0

    def _print_offers(self) -> None:
        self._say("Available items:")
        for item in self.catalog.items():
            self._say(f"  - {item.name}: {self._money(item.unit_price)}")
        self._say("\nSpecial Offers:")
        for discount in self.registry.all():
            self._say(f"  - {discount.item.name}: {discount.name}")

    # ------------------------------------------------------------------
    # Shopper actions
    # ------------------------------------------------------------------

    def add_item(self) -> None:
        name = self._ask("Enter item name: ")
        if not self.catalog.contains(name):
            self._say("Item not found in catalog.")
            log.warning("unknown_item", item=name)
            return

        raw = self._ask("Enter quantity: ")
        try:
            quantity = int(raw)
        except ValueError:
            self._say("Invalid quantity. Please enter a number.")
            log.warning("invalid_quantity", value=raw)
            return
        if quantity <= 0:
            self._say("Quantity must be positive.")
            return

        item = self.catalog.get(name)
        try:
            self.basket.add(item, quantity)
        except ValidationError as e:
            self._say(f"Error: {e}")
            log.warning("invalid_quantity", value=raw, error=str(e))
            return
        self._say(f"Added {quantity} {item.name} to basket.")
        log.info("basket_item_added", item=item.name, quantity=quantity)

    def remove_item(self) -> None:
        name = self._ask("Enter item name to remove: ")
        item = self.basket.find(name)
        if item is None:
            self._say(f"{name} is not in the basket.")
            return
        self.basket.remove(item)
        self._say(f"Removed {item.name} from basket.")
        log.info("basket_item_removed", item=item.name)

    def view_basket(self) -> None:
        if self.basket.is_empty():
            self._say("Basket is empty.")
            return
        self._say("\n--- Basket Contents ---")
        for line in self.basket.items():
            self._say(
                f"  {line.item.name}: {line.quantity} x {self._money(line.item.unit_price)}"
                f" = {self._money(line.line_total)}"
            )
        self._say(f"Total items: {self.basket.total_quantity}")

    def checkout(self) -> None:
        if self.basket.is_empty():
            self._say("Basket is empty. Cannot checkout.")
            log.warning("checkout_empty_basket")
            return
        try:
            result = self.service.process_checkout(self.basket)
        except CheckoutError as e:
            self._say(f"Checkout error: {e}")
            log.error("checkout_error", error=str(e))
            return

        self._say()
        self._say(format_receipt(result, self.basket.items(), self.settings.currency_symbol))
        log.info("checkout_completed", total=str(result.total))
        self.basket.clear()

    def clear_basket(self) -> None:
        self.basket.clear()
        self._say("Basket cleared.")
        log.info("basket_cleared")

    # ------------------------------------------------------------------
    # Admin actions
    # ------------------------------------------------------------------

    def authenticate(self) -> bool:
        """Prompt for the admin password, allowing MAX_ADMIN_ATTEMPTS tries."""
        expected = self.settings.admin_password.encode()
        for attempt in range(1, MAX_ADMIN_ATTEMPTS + 1):
            entered = self._ask(f"Enter admin password (attempt {attempt}/{MAX_ADMIN_ATTEMPTS}): ")
            if hmac.compare_digest(entered.encode(), expected):
                return True
            self._say("Incorrect password.")
            log.warning("admin_login_failed", attempt=attempt)
        self._say("Access denied. Returning to main menu.")
        log.warning("admin_access_denied", attempts=MAX_ADMIN_ATTEMPTS)
        return False

    def admin_menu(self) -> None:
        self._say("\n--- Admin Menu ---")
        if not self.authenticate():
            return

        handlers = {
            ADMIN_OPT_ADD_CATALOG: self.add_catalog_item,
            ADMIN_OPT_REMOVE_CATALOG: self.remove_catalog_item,
            ADMIN_OPT_ADD_DISCOUNT: self.add_discount,
            ADMIN_OPT_REMOVE_DISCOUNTS: self.remove_discounts,
            ADMIN_OPT_LIST_DISCOUNTS: self.list_discounts,
            ADMIN_OPT_VIEW_CATALOG: self.list_catalog,
        }
        while True:
            self._say(ADMIN_MENU)
            choice = self._ask("Choose an admin option: ")
            if choice == ADMIN_OPT_BACK:
                return
            handler = handlers.get(choice)
            if handler is None:
                self._say("Invalid admin option. Please try again.")
                continue
            handler()

    def add_catalog_item(self) -> None:
        name = self._ask("Enter new item name: ")
        price = self._ask("Enter price (e.g. 0.99): ")
        try:
            item = Item(name, price)
            self.catalog.add(item)
        except ValidationError as e:
            self._say(f"Error: {e}")
            log.warning("invalid_catalog_item", error=str(e))
            return
        except CatalogError as e:
            self._say(f"Cannot add item: {e}")
            log.warning("catalog_add_failed", error=str(e))
            return
        self._say(f"Item added: {item.name}")

    def remove_catalog_item(self) -> None:
        name = self._ask("Enter item name to remove: ")
        try:
            removed = self.catalog.remove(name)
        except CatalogError as e:
            self._say(f"Cannot remove item: {e}")
            log.warning("catalog_remove_failed", error=str(e))
            return
        self._say(f"Removed item: {removed.name}")
        dropped = self.registry.unregister_by_item(removed.name)
        if dropped:
            self._say(f"Also removed {dropped} discount(s) associated with the item.")

    def add_discount(self) -> None:
        self._say("Select discount type:")
        self._say("1. Buy 2 Get 1 Free")
        self._say("2. Bulk (X for Y)")
        kind = self._ask("Choice: ")
        if kind not in (DISCOUNT_TYPE_BUY_TWO, DISCOUNT_TYPE_BULK):
            self._say("Unknown discount type selected.")
            return

        name = self._ask("Enter item name the discount applies to: ")
        if not self.catalog.contains(name):
            self._say("Item not found in catalog.")
            return
        item = self.catalog.get(name)

        try:
            if kind == DISCOUNT_TYPE_BUY_TWO:
                discount = BuyTwoGetOneFree(item)
            else:
                raw_count = self._ask("Enter item count required for bulk (e.g. 3): ")
                try:
                    count = int(raw_count)
                except ValueError:
                    raise ValidationError(f"group size must be a whole number: {raw_count!r}") from None
                group_price = self._ask("Enter total price for the group (e.g. 0.75): ")
                discount = BulkPrice(item, count, group_price, self.settings.currency_symbol)
        except ValidationError as e:
            self._say(f"Error: {e}")
            log.warning("invalid_discount", error=str(e))
            return

        self.registry.register(discount)
        self._say(f"{discount.name} discount added for {item.name}")

    def remove_discounts(self) -> None:
        name = self._ask("Enter item name to remove discounts for: ")
        removed = self.registry.unregister_by_item(name)
        self._say(f"Removed {removed} discount(s) for item: {name}")

    def list_discounts(self) -> None:
        discounts = self.registry.all()
        if not discounts:
            self._say("No discounts configured.")
            return
        self._say("Configured discounts:")
        for discount in discounts:
            self._say(f" - {discount.item.name}: {discount.name}")

    def list_catalog(self) -> None:
        self._say("Catalog items:")
        for item in self.catalog.items():
            self._say(f" - {item.name}: {self._money(item.unit_price)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="grocery-checkout", description=APP_NAME)
    parser.add_argument(
        "--log-level",
        choices=[level.lower() for level in LOG_LEVELS],
        help="Minimum log level (overrides GROCERY_LOG_LEVEL)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Render logs as JSON (overrides GROCERY_LOG_JSON)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    level = args.log_level.upper() if args.log_level else settings.log_level
    json_logs = settings.log_json if args.json_logs is None else args.json_logs
    configure_logging(level, json_logs)

    return CheckoutApp(settings).run()


if __name__ == "__main__":
    sys.exit(main())
