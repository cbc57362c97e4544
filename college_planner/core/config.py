"""Configuration management for the College Planner service."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
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

    # Anthropic configuration (advisor endpoints answer 503 without it)
    ANTHROPIC_API_KEY: str | None = Field(default=None, description="Anthropic API key")

    # Environment
    PLANNER_ENV: str = Field(default="dev", description="Environment: dev, staging, prod, test")

    # AI advisor
    ADVISOR_MODEL: str = Field(
        default="claude-haiku-4-5-20251001", description="Model used for advice answers"
    )
    ADVISOR_MAX_TOKENS: int = Field(default=1024, description="Max tokens per advice answer")
    ADVISOR_REQUESTS_PER_MINUTE: int = Field(
        default=6, description="Sustained advisor requests per user per minute"
    )
    ADVISOR_BURST_SIZE: int = Field(default=10, description="Advisor burst allowance per user")

    # List limits
    CATALOG_LIMIT: int = Field(default=100, description="Max colleges returned from the catalog")
    ARTICLE_LIMIT: int = Field(default=100, description="Max published articles listed")
    FEATURED_ARTICLE_LIMIT: int = Field(default=3, description="Max featured articles")
    COMMUNITY_QUESTION_LIMIT: int = Field(
        default=20, description="Max community questions listed"
    )
    UPCOMING_TASK_LIMIT: int = Field(
        default=5, description="Upcoming tasks shown on the dashboard"
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
