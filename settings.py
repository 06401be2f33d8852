"""Environment settings with pydantic-settings."""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from URLMANAGER_* environment variables."""

    log_level: str = Field(default="INFO", description="Logging level")
    config_path: Optional[Path] = Field(
        default=None,
        description="YAML file with parsing/mutation options"
    )

    model_config = {
        "env_prefix": "URLMANAGER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
