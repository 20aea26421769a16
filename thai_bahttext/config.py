"""
Runtime settings, read from the environment.

A ``.env`` file in the project root is loaded first (local dev only), then:

    BAHTTEXT_VAT_RATE                     VAT rate as a fraction (default 0.07)
    BAHTTEXT_DEFAULT_WITHHOLDING_PERCENT  Withholding % when a document omits it (default 3)
    BAHTTEXT_LOG_LEVEL                    DEBUG / INFO / WARNING / ERROR (default INFO)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

from .exceptions import ConfigurationError

PROJECT_ROOT = Path(__file__).parent.parent

_env_file = PROJECT_ROOT / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

DEFAULT_VAT_RATE = Decimal("0.07")
DEFAULT_WITHHOLDING_PERCENT = Decimal("3")
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of the environment at load time."""

    vat_rate: Decimal = DEFAULT_VAT_RATE
    default_withholding_percent: Decimal = DEFAULT_WITHHOLDING_PERCENT
    log_level: str = DEFAULT_LOG_LEVEL


def _decimal_env(name: str, default: Decimal, low: Decimal, high: Decimal) -> Decimal:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        raise ConfigurationError(
            f"{name} must be a number, got {raw!r}", details={"variable": name}
        ) from None
    if not value.is_finite() or not low <= value <= high:
        raise ConfigurationError(
            f"{name} must be between {low} and {high}, got {raw!r}",
            details={"variable": name, "value": raw},
        )
    return value


def load_settings() -> Settings:
    """Read settings from the environment.

    Raises:
        ConfigurationError: If a variable is set but unusable.
    """
    log_level = os.getenv("BAHTTEXT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"BAHTTEXT_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}",
            details={"variable": "BAHTTEXT_LOG_LEVEL"},
        )

    return Settings(
        vat_rate=_decimal_env(
            "BAHTTEXT_VAT_RATE", DEFAULT_VAT_RATE, Decimal(0), Decimal(1)
        ),
        default_withholding_percent=_decimal_env(
            "BAHTTEXT_DEFAULT_WITHHOLDING_PERCENT",
            DEFAULT_WITHHOLDING_PERCENT,
            Decimal(0),
            Decimal(100),
        ),
        log_level=log_level,
    )


def configure_logging(settings: Settings) -> None:
    """Set up root logging for the CLI and the API server."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
