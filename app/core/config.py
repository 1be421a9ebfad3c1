"""
Core configuration and settings for the Product Catalog Service
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service information
    service_name: str = Field(default="product-catalog")
    service_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Server configuration
    port: int = Field(default=4000)
    host: str = Field(default="0.0.0.0")

    # Database configuration
    mongo_uri: str = Field(default="mongodb://localhost:27017")
    mongodb_database: str = Field(default="productdb")

    # JWT Authentication configuration (no default: a missing secret aborts startup)
    jwt_secret: str = Field(..., min_length=1)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration: int = Field(default=3600, gt=0)  # seconds

    # Cross-origin policy
    cors_origin: str = Field(default="http://localhost:3000")

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    correlation_id_header: str = Field(default="X-Correlation-ID")


@lru_cache
def get_config() -> Config:
    """Build the process configuration once, at startup"""
    return Config()
