"""Configuration management for the Founder Evaluation Engine."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    # Environment variables should be set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Supabase configuration (required)
    SUPABASE_URL: str = Field(..., description="Supabase project URL")
    SUPABASE_SERVICE_ROLE_KEY: str = Field(..., description="Supabase service role key")

    # OpenAI configuration (required)
    OPENAI_API_KEY: str = Field(..., description="OpenAI API key")

    # Environment
    EVAL_ENGINE_ENV: str = Field(default="dev", description="Environment: dev, staging, prod, test")

    # CORS
    CORS_ALLOW_ORIGINS: list[str] = Field(
        default_factory=lambda: ["*"], description="Origins allowed to call the API"
    )

    # AI recommendations
    RECOMMENDATIONS_MODEL: str = Field(default="gpt-4o", description="Model for business recommendations")
    RECOMMENDATIONS_TEMPERATURE: float = Field(
        default=0.3, description="Sampling temperature for recommendations"
    )
    RECOMMENDATIONS_MAX_TOKENS: int = Field(
        default=2000, description="Completion token cap for recommendations"
    )

    # AI business plan enhancement
    ENHANCE_PLAN_MODEL: str = Field(default="gpt-4o", description="Model for business plan enhancement")
    ENHANCE_PLAN_TEMPERATURE: float = Field(
        default=0.4, description="Sampling temperature for plan enhancement"
    )
    ENHANCE_PLAN_MAX_TOKENS: int = Field(
        default=3000, description="Completion token cap for plan enhancement"
    )

    # Upstream call bounds
    LLM_TIMEOUT_SECONDS: float = Field(
        default=60.0, description="Timeout for a single LLM request in seconds"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If required environment variables are missing
    """
    return Settings()
