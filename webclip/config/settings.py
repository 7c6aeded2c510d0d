from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings
from decouple import config, Csv


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Page Access
    request_timeout: int = config("REQUEST_TIMEOUT", default=15, cast=int)
    max_retries: int = config("MAX_RETRIES", default=3, cast=int)
    user_agent: str = config(
        "USER_AGENT",
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    )

    # Clip Records
    placeholder_text: str = config(
        "PLACEHOLDER_TEXT",
        default="Content could not be extracted (Restricted Page)."
    )
    untitled_title: str = config("UNTITLED_TITLE", default="Untitled Page")
    clip_tags: str = config("CLIP_TAGS", default="web-clip")

    # Logging
    log_level: str = config("LOG_LEVEL", default="INFO")
    console_log_level: str = config("CONSOLE_LOG_LEVEL", default="WARNING")
    log_file: str = config("LOG_FILE", default="./logs/webclip.log")

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore"
    }

    def default_tags(self) -> List[str]:
        """Tags attached to a clip when the caller gives none."""
        return Csv()(self.clip_tags)


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def ensure_directories():
    """Ensure required directories exist."""
    Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
