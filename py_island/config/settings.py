"""Application settings pulled from environment variables."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from PY_ISLAND_* variables or a .env file."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    # Terrain Defaults
    island_size: int = Field(default=64, description="Last valid grid index")
    seed: Optional[str] = Field(default=None, description="Default terrain seed")

    model_config = SettingsConfigDict(
        env_prefix="PY_ISLAND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
