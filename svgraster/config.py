"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgraster_log_level: str = "info"

    # Canvas
    svgraster_background: str = "white"
    # Used when a shape has no fill/stroke or an unknown color token
    svgraster_default_color: str = "black"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
