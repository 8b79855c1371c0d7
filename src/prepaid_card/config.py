"""Configuration management for Prepaid Card Service."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./prepaid_cards.db",
        description="SQLAlchemy connection URL for the card store",
    )
    database_echo: bool = Field(default=False, description="Log SQL statements")

    # Service Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(default="development", description="Environment name")
    service_name: str = Field(default="prepaid-card-service", description="Service name")


# Global settings instance
settings = Settings()
