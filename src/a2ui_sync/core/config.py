"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Engine settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="A2UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Templates
    template_cache_size: int = Field(default=256, gt=0, description="Compiled template cache size")
    template_cache_ttl: int | None = Field(
        default=None, gt=0, description="Compiled template TTL (seconds, None = never expire)"
    )

    # Inbound messages
    strict_messages: bool = Field(
        default=False, description="Raise on invalid messages instead of logging and skipping"
    )
    max_message_size: int = Field(default=512 * 1024, gt=0, description="Max JSONL line size")
    max_json_depth: int = Field(default=32, gt=0, description="Max message nesting depth")

    # Actions
    warn_on_missing_handler: bool = Field(
        default=True, description="Log a warning when an action has no handler"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
