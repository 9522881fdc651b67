"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".tradesim"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRADESIM_",
    )

    app_name: str = "Trading Simulator"
    app_version: str = "0.1.0"

    # Data directory (SQLite database lives here unless database_url is set)
    data_dir: Optional[Path] = None
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Ledger behavior
    order_max_retries: int = Field(default=3, ge=1)
    store_timeout_seconds: float = Field(default=5.0, gt=0)

    # Valuation / simulation
    value_series_capacity: int = Field(default=20, ge=1)
    price_tick_seconds: float = Field(default=2.0, ge=0)
    quote_seed: Optional[int] = None

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "tradesim.db"
        return f"sqlite:///{db_path}"


# Global settings instance (reset_settings forces a reload)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
