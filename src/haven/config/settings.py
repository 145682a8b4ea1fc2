"""
HAVEN Application Settings

Configuration management using Pydantic Settings.
All sensitive values are loaded from environment variables.

SECURITY: Never log or expose settings containing secrets.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Local episode store configuration."""

    model_config = SettingsConfigDict(env_prefix="HAVEN_DB_")

    url: str = Field(
        default="sqlite+aiosqlite:///./haven.db",
        description="SQLAlchemy async database URL",
    )
    echo: bool = Field(default=False, description="Log SQL statements")


class OpenAISettings(BaseSettings):
    """OpenAI API configuration."""

    model_config = SettingsConfigDict(env_prefix="HAVEN_OPENAI_")

    api_key: SecretStr = Field(default=SecretStr(""), description="OpenAI API key")
    model: str = Field(default="gpt-4o-mini", description="Model identifier")
    max_tokens: int = Field(default=500, ge=50, le=4096)
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)


class GeminiSettings(BaseSettings):
    """Google Gemini API configuration."""

    model_config = SettingsConfigDict(env_prefix="HAVEN_GEMINI_")

    api_key: SecretStr = Field(default=SecretStr(""), description="Gemini API key")
    model: str = Field(default="gemini-1.5-flash", description="Model identifier")


class ClassifierSettings(BaseSettings):
    """
    Remote classifier configuration.

    mode=llm calls the configured LLM provider in-process.
    mode=http posts to a deployed classifier service at base_url.
    """

    model_config = SettingsConfigDict(env_prefix="HAVEN_CLASSIFIER_")

    mode: Literal["llm", "http"] = Field(default="llm", description="Classifier transport")
    base_url: str = Field(
        default="http://localhost:8000/classifier",
        description="Base URL of the HTTP classifier service",
    )
    timeout_seconds: float = Field(
        default=8.0,
        gt=0.0,
        le=60.0,
        description="Bound on a single remote classification attempt",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class Settings(BaseSettings):
    """
    Main application settings.

    All configuration is loaded from environment variables with HAVEN_ prefix.
    Sensitive values use SecretStr to prevent accidental logging.

    Usage:
        settings = get_settings()
        timeout = settings.classifier.timeout_seconds
    """

    model_config = SettingsConfigDict(
        env_prefix="HAVEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    api_version: str = Field(default="v1", description="API version prefix")
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Origins allowed to call the app API",
    )
    timezone: str = Field(
        default="UTC",
        description="IANA timezone used for hour-of-day episode patterns",
    )
    default_country_code: str = Field(
        default="US",
        min_length=2,
        max_length=4,
        description="Jurisdiction used for emergency resources when the client sends none",
    )

    # LLM Provider selection
    llm_primary_provider: Literal["openai", "gemini_flash"] = Field(
        default="gemini_flash",
        description="LLM provider backing the in-process classifier"
    )

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    openai: OpenAISettings = Field(default_factory=OpenAISettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)

    @field_validator("default_country_code")
    @classmethod
    def upper_country_code(cls, v: str) -> str:
        return v.upper()

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are only loaded once.
    For testing, use dependency injection to override.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
