"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    image_dir: Path = Path("images")
    seed_sample_recipes: bool = True
    swipe_threshold: float = Field(default=150, gt=0)
    swipe_limit: float = Field(default=500, gt=0)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="MOOD_RECIPES_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
