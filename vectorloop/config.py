"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from vectorloop.engine.config import Precision


class Settings(BaseSettings):
    vectorloop_env: str = "development"
    vectorloop_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Tessellation defaults for the CLI and HTTP API
    default_sample_count: int = 1000
    default_precision: Precision = Precision.FLOAT64
    closure_tolerance: float = 1e-9
    # Reject a gap before closepath instead of drawing the closing line
    strict_closure: bool = False

    # Expect <svg><g><path d="..."/></g></svg>; set false to accept a path directly under <svg>
    require_group: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
