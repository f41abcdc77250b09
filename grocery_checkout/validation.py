"""Validation helpers for constructor and call-time precondition checks.

Eliminates repeated validation boilerplate across models and discounts.
"""

from decimal import Decimal
from typing import Any

from .errors import ValidationError


def require_present(value: Any, error_msg: str) -> None:
    """Require that a value is not None."""
    if value is None:
        raise ValidationError(error_msg)


def require_text(value: Any, error_msg: str) -> str:
    """Require a non-blank string and return it trimmed."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(error_msg)
    return value.strip()


def require_int(value: Any, error_msg: str) -> None:
    """Require a real integer (bool is rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(error_msg)


def require_positive(value: int, error_msg: str) -> None:
    """Require that a value is greater than zero."""
    require_int(value, error_msg)
    if value <= 0:
        raise ValidationError(error_msg)


def require_non_negative(value: int, error_msg: str) -> None:
    """Require that a value is zero or greater."""
    require_int(value, error_msg)
    if value < 0:
        raise ValidationError(error_msg)


def require_at_most(value: int, limit: int, error_msg: str) -> None:
    """Require that a value does not exceed limit."""
    if value > limit:
        raise ValidationError(error_msg)


def require_non_negative_amount(value: Decimal, error_msg: str) -> None:
    """Require a numeric amount that is zero or greater."""
    require_present(value, error_msg)
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        raise ValidationError(error_msg)
    if value < 0:
        raise ValidationError(error_msg)
