"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "StockPredict Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # SQLite (prediction history)
    sqlite_path: Optional[str] = None  # Defaults to ./data/stockpredict.db

    # CORS (Frontend URL)
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Market data
    primary_data_source: str = "yahoo"  # Options: yahoo, alphavantage
    alphavantage_api_key: Optional[str] = None
    alphavantage_base_url: str = "https://www.alphavantage.co/query"
    history_lookback: int = 30  # Daily closes per prediction
    request_timeout_seconds: float = 10.0

    # History price refresh (keeps provider rate limits)
    quote_batch_size: int = 2
    quote_batch_delay_seconds: float = 2.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
