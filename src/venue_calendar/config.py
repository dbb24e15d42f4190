"""Runtime configuration read from environment variables.

Every setting has a default, so nothing needs to be configured for local
development or tests.
"""

import os
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "VENUE_CALENDAR_"

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_decimal(env: Mapping[str, str], name: str, default: str) -> Decimal:
    raw = env.get(name) or default
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


class CalendarSettings(BaseModel):
    """Calendar policy and service settings."""

    model_config = ConfigDict(frozen=True)

    environment: str = "dev"
    log_level: str = "INFO"
    min_nights: int = Field(default=1, description="Minimum stay length")
    max_nights: int = Field(
        default=365,
        ge=1,
        description="Longest stay the API will evaluate",
    )
    allow_past: bool = Field(default=False, description="Whether past days are selectable")
    cleaning_fee: Decimal = Field(default=Decimal("25"), ge=0)
    tax_rate: Decimal = Field(default=Decimal("0.10"), ge=0)
    currency: str = "USD"
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CORS_ORIGINS)
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalendarSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            CalendarSettings with environment overrides applied

        Raises:
            ValueError: If a numeric variable can't be parsed
        """
        env = os.environ if environ is None else environ
        origins = env.get("CORS_ALLOW_ORIGINS")

        return cls(
            environment=env.get("ENVIRONMENT", "dev"),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            min_nights=_env_int(env, f"{ENV_PREFIX}MIN_NIGHTS", 1),
            max_nights=_env_int(env, f"{ENV_PREFIX}MAX_NIGHTS", 365),
            allow_past=_env_bool(env, f"{ENV_PREFIX}ALLOW_PAST", False),
            cleaning_fee=_env_decimal(env, f"{ENV_PREFIX}CLEANING_FEE", "25"),
            tax_rate=_env_decimal(env, f"{ENV_PREFIX}TAX_RATE", "0.10"),
            currency=env.get(f"{ENV_PREFIX}CURRENCY", "USD"),
            cors_allow_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins
                else list(DEFAULT_CORS_ORIGINS)
            ),
        )
