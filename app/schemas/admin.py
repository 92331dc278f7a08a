"""
Pydantic schemas for admin site settings.
"""

from pydantic import BaseModel, Field, field_validator

from app.config import ConfigKey
from app.core.site_config import SiteConfig, site_config
from app.services.censor import parse_word_list


class CensorSettingsUpdate(BaseModel):
    """Schema for updating the censored word list."""

    censored_words: str = Field(default="", description="Comma-separated list of words to mask")

    @field_validator("censored_words", mode="before")
    @classmethod
    def normalize_words(cls, v: str | list[str]) -> str:
        """Accept a list or a comma-separated string; store a normalized string."""
        if isinstance(v, list):
            v = ",".join(v)
        if isinstance(v, str):
            return ",".join(parse_word_list(v))
        return v

    @property
    def words(self) -> list[str]:
        return parse_word_list(self.censored_words)


def apply_censor_settings(update: CensorSettingsUpdate, config: SiteConfig = site_config) -> None:
    """
    Write the new word list to the runtime site configuration.

    Censor filters bound to the config pick up the change on their next call.
    """
    config.set(ConfigKey.CENSORED_WORDS, update.censored_words)
