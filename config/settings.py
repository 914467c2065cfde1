"""
Configuration settings for the interview question service.
Uses pydantic-settings for environment variable management.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load .env file BEFORE pydantic-settings initializes
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Upstream (Gemini) configuration
    gemini_api_key: str | None = Field(
        default=None,
        description="API key for the Gemini generateContent endpoint",
    )
    gemini_model: str = Field(default="gemini-2.5-flash")
    gemini_api_base: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta"
    )
    generation_temperature: float = Field(default=0.8)
    upstream_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Upper bound on the outbound generation call",
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000)
    allowed_origins: str = Field(
        default="*",
        description="Comma-separated list of CORS origins",
    )
    log_level: str = Field(default="INFO")

    # Sentry
    sentry_dsn: str | None = Field(default=None)
    sentry_environment: str = Field(default="development")

    @property
    def generation_url(self) -> str:
        """Full generateContent URL for the configured model."""
        base = self.gemini_api_base.rstrip("/")
        return f"{base}/models/{self.gemini_model}:generateContent"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


# Global settings instance
settings = Settings()
