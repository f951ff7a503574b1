"""Configuration settings for the Nova POS dashboard."""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Flat settings read from environment variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gemini (optional: a missing key makes insights fall back locally)
    google_api_key: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("GOOGLE_API_KEY", "API_KEY")
    )
    gemini_model: str = Field(
        default="gemini-3-flash-preview", validation_alias="GEMINI_MODEL"
    )

    # LLM parameters
    llm_max_tokens: int = Field(default=1024, validation_alias="LLM_MAX_TOKENS")
    llm_temperature: float = Field(default=0.7, validation_alias="LLM_TEMPERATURE")
    insight_timeout: float = Field(default=30.0, validation_alias="INSIGHT_TIMEOUT")

    # Ledger
    invoice_prefix: str = Field(default="NV-", validation_alias="INVOICE_PREFIX")
    currency_symbol: str = Field(default="$", validation_alias="CURRENCY_SYMBOL")
    seed_demo_orders: bool = Field(default=True, validation_alias="SEED_DEMO_ORDERS")
    max_order_amount: Decimal = Field(
        default=Decimal("1000000000"),
        gt=0,
        le=Decimal("1000000000000"),
        validation_alias="MAX_ORDER_AMOUNT",
    )
    event_buffer_size: int = Field(default=100, validation_alias="EVENT_BUFFER_SIZE")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", validation_alias="LOG_LEVEL"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", validation_alias="LOG_FORMAT"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
