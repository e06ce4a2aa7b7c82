"""Application settings, read from environment variables (or a .env file)."""

from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_title: str = "Islamic Inheritance Calculator"
    app_description: str = "Calculate inheritance shares according to Islamic rules"

    # Display
    currency_format: str = "inr"
    footer_author: str = "Mir Mohsin"
    footer_url: str = "https://mirmohsin.fun/"

    # API
    cors_origins: List[str] = ["http://localhost", "http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
