"""Application settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory (repo root / data)
DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """Runtime configuration, read from LIFTLOG_* variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="LIFTLOG_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = DATA_DIR
    db_filename: str = "liftlog.db"
    session_filename: str = "session.json"

    # Completion API (routed through litellm; provider key comes from env)
    llm_model: str = "groq/llama-3.3-70b-versatile"
    llm_advice_model: str = "groq/llama-3.1-8b-instant"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 2000
    llm_api_key: str | None = None

    # Identity
    session_ttl_hours: int = 24 * 7

    log_level: str = "WARNING"
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
