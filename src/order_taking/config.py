from __future__ import annotations

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from ORDER_TAKING_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="ORDER_TAKING_", frozen=True)

    log_level: str = "INFO"
    log_json: bool = False
    shipping_base_cost: Decimal = Field(
        default=Decimal("2.00"), validation_alias="ORDER_TAKING_SHIPPING_BASE"
    )
    shipping_per_line_cost: Decimal = Field(
        default=Decimal("0.00"), validation_alias="ORDER_TAKING_SHIPPING_PER_LINE"
    )
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()
