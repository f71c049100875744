"""
Configuration using pydantic-settings.

Values can be overridden with environment variables prefixed by CONNECT_FOUR_ (or a .env file).
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONNECT_FOUR_", env_file=".env")

    board_height: int = Field(default=6, ge=4, description="Number of rows")
    board_width: int = Field(default=7, ge=4, description="Number of columns")
    player_one_color: str = "red"
    player_two_color: str = "gold"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
