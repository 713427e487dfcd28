"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Renderer settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="AIUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Rendering
    max_render_depth: int = Field(
        default=64, gt=0, description="Deepest component nesting rendered before the depth fallback"
    )

    # Description loading
    max_ui_spec_size: int = Field(
        default=512 * 1024, gt=0, description="Max UI description size (bytes)"
    )
    max_json_depth: int = Field(default=200, gt=0, description="Max JSON nesting depth")
    repair_json: bool = Field(default=True, description="Attempt to repair malformed JSON")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
