from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # API Keys
    openai_api_key: str = ""
    anthropic_api_key: str = ""  # Only needed when llm_provider == "anthropic"

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    videos_table: str = "videos"

    # Text generation
    llm_provider: str = "openai"
    llm_model: str = ""  # Empty picks the provider default (see DEFAULT_MODELS)
    llm_temperature: float = 0.5
    llm_max_tokens: int = 1024

    # Summarization pipeline
    chunk_size: int = 1000
    pacing: str = "fixed"  # "fixed", "token_bucket" or "none"
    chunk_delay_seconds: float = 1.0
    rate_limit_per_minute: int = 60

    # Transcript acquisition
    transcripts_dir: str = "./transcripts"
    subtitle_lang: str = "en"

    # App config
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    cors_origins: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
