"""Configuration management."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["json", "plain"] = Field(
        default="plain", description="Logging format (plain or json)"
    )

    # Computation
    calculations_enabled: bool = Field(
        default=True, description="Whether new networks compute ownership on every change"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "GRAPH_VORONOI_"
        extra = "ignore"


settings = Settings()
