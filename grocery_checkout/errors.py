"""Error types for the grocery checkout engine."""

from typing import Optional


class CheckoutError(Exception):
    """Base class for checkout errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class ValidationError(CheckoutError):
    """Malformed item, discount configuration or calculation input."""

    def __init__(self, message: str):
        super().__init__(f"invalid input: {message}")


class EmptyBasketError(CheckoutError):
    """Checkout was attempted on a basket with no entries."""

    def __init__(self, message: str = "cannot check out an empty basket"):
        super().__init__(message)


class AggregationError(CheckoutError):
    """Unexpected failure while summing line costs or applying discounts."""

    def __init__(self, cause: Exception):
        super().__init__("failed to process checkout", cause)


class CatalogError(CheckoutError):
    """Catalog lookup or maintenance failed."""
