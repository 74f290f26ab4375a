"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from nineblock.engine.colors import parse_hex_color
from nineblock.engine.config import RenderConfig


class Settings(BaseSettings):
    nineblock_env: str = "development"
    nineblock_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering
    nineblock_default_size: int = 64
    nineblock_max_size: int = 1024
    nineblock_background: str = "#ffffff"
    nineblock_patch_size: float = 20.0

    # Prepended to identities before hashing, so codes can't be precomputed
    nineblock_salt: str = ""

    # HTTP caching
    nineblock_cache_max_age: int = 86400

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def render_config(self) -> RenderConfig:
        return RenderConfig(
            background=parse_hex_color(self.nineblock_background),
            patch_size=self.nineblock_patch_size,
        )


settings = Settings()
