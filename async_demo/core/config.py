"""
Configuration management with Pydantic Settings.

Uses pydantic-settings for environment variable loading with type validation.
"""

from decimal import Decimal
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from async_demo.core.exceptions import ConfigurationError


class RemoteSettings(BaseSettings):
    """External JSON API configuration."""

    model_config = SettingsConfigDict(env_prefix="REMOTE_", populate_by_name=True)

    base_url: str = Field(
        default="https://jsonplaceholder.typicode.com",
        alias="REMOTE_BASE_URL",
    )
    timeout_seconds: float = Field(default=10.0, gt=0, le=120, alias="REMOTE_TIMEOUT_SECONDS")
    user_agent: str = Field(default="async-demo/1.0", alias="REMOTE_USER_AGENT")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v


class ProductSettings(BaseSettings):
    """Simulated product lookup configuration."""

    model_config = SettingsConfigDict(env_prefix="PRODUCT_", populate_by_name=True)

    lookup_delay_ms: int = Field(default=500, ge=0, le=60_000, alias="PRODUCT_LOOKUP_DELAY_MS")
    price: Decimal = Field(default=Decimal("49.99"), ge=0, alias="PRODUCT_PRICE")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # App info
    app_name: str = Field(default="Async Fan-out Demo", alias="APP_NAME")
    version: str = "1.0.0"
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")

    cors_origins: List[str] = Field(
        default=[
            "http://localhost:5173",  # Vite dev server
            "http://localhost:3000",
            "http://127.0.0.1:5173",
            "http://127.0.0.1:3000",
        ],
        alias="CORS_ORIGINS",
    )

    # Nested settings
    remote: RemoteSettings = Field(default_factory=RemoteSettings)
    product: ProductSettings = Field(default_factory=ProductSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v_upper


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Raises:
        ConfigurationError: If an environment or .env value fails validation
    """
    try:
        return Settings()
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigurationError(f"Invalid settings: {fields}") from e


# Global config instance
config = get_settings()
