"""Application settings and configuration."""

from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_tolerance_bands() -> dict[str, Decimal]:
    """Return the default per-category tolerance bands (percentage points)."""
    return {
        "Fixed Income": Decimal("2"),
        "Equities": Decimal("3"),
        "Alternative Investments": Decimal("1"),
        "Caja": Decimal("1"),
        "Balanceado": Decimal("2"),
        "Other": Decimal("1"),
    }


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="REBALANCE_",
    )

    app_name: str = "Portfolio Rebalancing Advisor"
    app_version: str = "0.1.0"

    log_level: str = "INFO"

    # Timestamps (portfolio uploads, reports) are stamped in this timezone
    timezone: str = "America/Santiago"

    # Analysis behavior
    asset_tolerance_default: Decimal = Field(default=Decimal("0.5"), ge=0)
    default_tolerance_bands: dict[str, Decimal] = Field(default_factory=default_tolerance_bands)
    symbol_matching: Literal["exact", "normalized"] = "exact"

    # Import behavior
    max_import_rows: int = Field(default=10_000, ge=1)

    # Load built-in profiles' sample portfolios at startup
    seed_sample_data: bool = True


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests and embedding apps)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
