"""Application configuration using Pydantic Settings."""

from typing import List
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# NOTE: logfire.configure() is not called here. Logfire is configured once at
# application startup (main.py via observability/logfire_config.py) or in
# pytest hooks (conftest.py).


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field has a default so the API can start without a provider key;
    in that case all generation requests are served from fallback content.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # CORS Settings
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins"
    )

    # Generative-text provider (OpenAI-compatible chat completions)
    provider_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("provider_api_key", "deepseek_api_key"),
        description="Bearer API key for the provider",
    )
    provider_base_url: str = Field(default="https://api.deepseek.com", description="Provider API base URL")
    provider_model: str = Field(default="deepseek-chat", description="Provider model identifier")
    provider_max_tokens: int = Field(default=2000, ge=1, description="Generation length cap")
    provider_timeout: float = Field(default=30.0, gt=0, description="Provider request timeout in seconds")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(default="", description="Logfire observability token")

    @field_validator("allowed_origins")
    @classmethod
    def parse_origins(cls, v: str) -> List[str]:
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("provider_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate that the provider base URL is provided."""
        if not v.strip():
            raise ValueError("Provider base URL cannot be empty")
        return v.strip().rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


# Create a singleton instance
settings = Settings()
