"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting is overridable with a CATALOG_-prefixed environment variable
    - get_settings() is cached (lru_cache), single instance per process
    - delay_min_ms <= delay_max_ms
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="CATALOG_", case_sensitive=False,
    )

    # Upstream endpoints
    products_url: str = "http://localhost:3000/products.json"
    log_sink_url: str = "http://localhost:3000/api/logs"
    http_timeout_seconds: float = 10.0

    # Latency simulation (milliseconds, inclusive bounds)
    delay_min_ms: int = 2000
    delay_max_ms: int = 60_000
    delay_fallback_ms: int = 2000

    # Presentation
    currency: str = "HKD"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def check_delay_bounds(self) -> "Settings":
        if self.delay_min_ms > self.delay_max_ms:
            raise ValueError("delay_min_ms must not exceed delay_max_ms")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
