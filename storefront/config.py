"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - The blade length grid is validated once here: positive step, min <= default <= max

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box in development
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="STOREFRONT_", case_sensitive=False,
    )

    app_name: str = "Forge Storefront API"

    # Display
    currency_symbol: str = "$"

    # Custom blade length grid (centimetres)
    blade_length_min_cm: Decimal = Decimal("15")
    blade_length_max_cm: Decimal = Decimal("30")
    blade_length_step_cm: Decimal = Decimal("0.5")
    blade_length_default_cm: Decimal = Decimal("20")

    # In-memory shop sessions (oldest evicted beyond this bound)
    max_shop_sessions: int = 1000

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def validate_length_grid(self):
        if self.blade_length_step_cm <= 0:
            raise ValueError("blade_length_step_cm must be positive")
        if self.blade_length_min_cm > self.blade_length_max_cm:
            raise ValueError("blade_length_min_cm must not exceed blade_length_max_cm")
        if not (
            self.blade_length_min_cm
            <= self.blade_length_default_cm
            <= self.blade_length_max_cm
        ):
            raise ValueError("blade_length_default_cm must lie within the grid")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
