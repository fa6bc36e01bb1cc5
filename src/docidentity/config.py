"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Cosmos DB
    cosmos_endpoint: str = Field(
        default="https://localhost:8081/",
        description="Cosmos DB account endpoint",
    )
    cosmos_key: str = Field(default="", description="Cosmos DB account key")
    cosmos_database: str = Field(default="identity", description="Database name")
    cosmos_role_container: str = Field(
        default="roles",
        description="Container holding one document per role",
    )
    cosmos_consistency_level: Literal[
        "Strong", "BoundedStaleness", "Session", "ConsistentPrefix", "Eventual"
    ] = Field(default="Session", description="Client consistency level")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log renderer outside development",
    )
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
