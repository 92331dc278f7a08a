"""
Application Configuration
Uses Pydantic Settings for environment-based configuration
"""

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    PROJECT_NAME: str = "Forum Render"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development", pattern="^(development|staging|production)$")
    DEBUG: bool = Field(default=False)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Initial values for the runtime site configuration (app.core.site_config).
    # Admins can change these while the process is running.
    FORUM_NAME: str = "Forum"
    HEADER_MSG: str = ""
    # Comma-separated; a list is accepted when constructing Settings directly
    CENSORED_WORDS: str = Field(default="")

    # Censorship
    CENSOR_PLACEHOLDER: str = Field(default="****", min_length=1)

    @field_validator("CENSORED_WORDS", mode="before")
    @classmethod
    def join_censored_words(cls, v: str | list[str]) -> str:
        """Store the word list as the comma-separated string the filter caches on"""
        if isinstance(v, list):
            return ",".join(word.strip() for word in v)
        return v


# Create global settings instance

load_dotenv()
settings = Settings()


class ConfigKey:
    """Runtime site configuration keys"""

    FORUM_NAME = "forum_name"
    HEADER_MSG = "header_msg"
    CENSORED_WORDS = "censored_words"


class ContentLimits:
    """Length limits for group fields"""

    GROUP_NAME_MIN = 3
    GROUP_NAME_MAX = 40
    GROUP_DESC_MAX = 160
    HEADER_MSG_MAX = 160
