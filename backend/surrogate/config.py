"""Assistant settings, read from the environment and backend/.env."""

import logging
from pathlib import Path
from typing import Union
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# backend/
BASE_DIR = Path(__file__).parent.parent


class Settings(BaseSettings):
    """Runtime settings. Every field can be overridden by an env var of the same name."""

    # Application
    app_name: str = "AI Surrogate Agent"
    debug: bool = False
    log_level: str = "INFO"

    # Model credential; empty means offline replies
    anthropic_api_key: str = ""

    # Language model
    llm_model: str = "claude-sonnet-4-5-20250929"
    llm_max_tokens: int = 2048
    llm_temperature: float = 0.3

    # JSON collections live here
    data_dir: str = str(BASE_DIR / "data")

    # Conversation defaults
    default_user_name: str = "Boss"
    default_language: str = "en"

    # CORS
    cors_origins: Union[list[str], str] = [
        "http://localhost:3000",
        "http://localhost:8081",
        "http://localhost:19006",
    ]

    @field_validator("anthropic_api_key", mode="after")
    @classmethod
    def warn_offline_mode(cls, v):
        """Warn when the model credential is missing."""
        if not v:
            logger.warning(
                "Anthropic API key not configured - assistant will answer in offline mode"
            )
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse comma-separated CORS origins string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"), env_file_encoding="utf-8", case_sensitive=False
    )


# Shared instance
settings = Settings()
