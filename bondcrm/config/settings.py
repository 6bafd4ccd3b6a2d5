"""Application settings using Pydantic."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bondcrm.validation.patterns import DEFAULT_KNOWN_INSTITUTIONS


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Ollama LLM Configuration
    llm_ollama_base_url: str = "http://localhost:11434"
    llm_model_name: str = "gpt-oss:20b"
    llm_fallback_model_name: str = "gemma3:latest"  # Used when primary returns empty
    # Low temperature keeps directions consistent across calls
    llm_temperature: float = 0.2
    llm_top_p: float = 0.8
    llm_top_k: int = 10
    llm_request_timeout: int = 120
    llm_num_ctx: int = 8192
    llm_num_predict: int = 4096  # Max tokens to generate

    # Direction validation
    # JSON list in the environment, e.g. VALIDATION_KNOWN_INSTITUTIONS='["Bosera", "Nomura"]'
    validation_known_institutions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_KNOWN_INSTITUTIONS)
    )

    # Activity import
    default_currency: str = "USD"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
