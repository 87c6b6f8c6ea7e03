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

    # Language model API (OpenAI compatible)
    openai_api_url: str = Field(
        default="https://api.openai.com/v1",
        description="OpenAI-compatible API URL",
    )
    openai_api_key: str = Field(default="", description="OpenAI API key")
    embedding_model: str = Field(
        default="text-embedding-3-small",
        description="Embedding model for document chunks",
    )
    evaluation_model: str = Field(
        default="gpt-4",
        description="Model for question generation and answer evaluation",
    )
    feedback_model: str = Field(
        default="gpt-3.5-turbo",
        description="Model for answer feedback",
    )

    # Content pipeline
    chunk_max_tokens: int = Field(
        default=8000,
        ge=1,
        description="Token budget per chunk (1 token ~ 4 characters)",
    )
    upload_dir: str | None = Field(
        default=None,
        description="Directory for temporary upload files (system temp dir if unset)",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")
    cors_origins: str = Field(
        default="",
        description="Comma-separated origins allowed to call the API",
    )
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
