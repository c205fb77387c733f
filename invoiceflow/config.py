"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, validator


STORAGE_BACKENDS = ("memory", "sql")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # Storage
    storage_backend: str = Field(default="sql", description="Key-value backend: memory or sql")
    database_url: str = Field(default="sqlite:///invoiceflow.db", description="SQLAlchemy URL for the sql backend")
    storage_key_prefix: str = Field(default="invoiceflow_", description="Prefix for every stored key")
    storage_quota_bytes: Optional[int] = Field(default=None, ge=1, description="Byte quota for the memory backend")

    # Invoicing
    default_payment_terms_days: int = Field(default=30, ge=0)
    duplicate_suffix: str = Field(default="-COPY")

    @validator("storage_backend", pre=True)
    def parse_storage_backend(cls, v):
        """Normalise and check the storage backend name."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return "sql"
        v = str(v).strip().lower()
        if v not in STORAGE_BACKENDS:
            raise ValueError(f"Unknown storage backend: {v} (expected one of {', '.join(STORAGE_BACKENDS)})")
        return v

    @validator("log_level", pre=True)
    def parse_log_level(cls, v):
        """Upper-case the log level name."""
        if not v:
            return "INFO"
        return str(v).strip().upper()

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    return Settings()
