"""
config.py - Converter configuration

Settings are read from environment variables (prefixed with BANGLISH_)
or from a .env file in the working directory.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Converter settings.

    For example, BANGLISH_DICTIONARY_PATH=words.yaml adds a user word list
    on top of the built-in common words.
    """

    model_config = SettingsConfigDict(
        env_prefix="BANGLISH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Delay before the real-time converter fires, in milliseconds
    DEBOUNCE_MS: int = 100

    # Optional YAML file of extra Banglish -> Bengali word overrides
    DICTIONARY_PATH: str | None = None


@lru_cache()
def get_settings() -> Settings:
    """
    Get converter settings.

    Uses lru_cache so the environment is only read once.
    """
    return Settings()
