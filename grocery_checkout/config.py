"""Runtime configuration from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ValidationError
from .money import DEFAULT_CURRENCY_SYMBOL

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
APP_NAME = "Grocery Store Checkout System"


@dataclass(frozen=True)
class Settings:
    admin_password: str = "admin"
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    log_level: str = "WARNING"
    log_json: bool = False


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def parse_log_level(value: str) -> str:
    """Normalise a log level name.

    Raises:
        ValidationError: If the level is not one of LOG_LEVELS.
    """
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValidationError(f"unknown log level: {value}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Load settings from environment variables.

    Environment variables:
        GROCERY_ADMIN_PASSWORD: Admin menu password (default: admin)
        GROCERY_CURRENCY_SYMBOL: Display currency symbol (default: £)
        GROCERY_LOG_LEVEL: DEBUG, INFO, WARNING (default), ERROR or CRITICAL
        GROCERY_LOG_JSON: Render logs as JSON when true (default: false)
    """
    env = os.environ if environ is None else environ
    defaults = Settings()

    return Settings(
        admin_password=env.get("GROCERY_ADMIN_PASSWORD", defaults.admin_password),
        currency_symbol=env.get("GROCERY_CURRENCY_SYMBOL", defaults.currency_symbol),
        log_level=parse_log_level(env.get("GROCERY_LOG_LEVEL", defaults.log_level)),
        log_json=_parse_bool(env.get("GROCERY_LOG_JSON", "false")),
    )
