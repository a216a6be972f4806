"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Article source; empty means the bundled mock data
    articles_file: str = ""

    # Simulated backend delay for the mock store (milliseconds)
    mock_latency_ms: int = 0

    # Listing
    posts_per_page: int = 9
    related_limit: int = 3

    # Rendered content cache
    render_cache_ttl: float = 300
    render_cache_size: int = 128

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
