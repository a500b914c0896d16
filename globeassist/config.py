"""
Configuration management for GlobeAssist.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Search API (Serper)
    serper_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("serper_api_key", "serper_google_search_api"),
    )

    # LLM (OpenRouter) - link ranking and chat assistant
    openrouter_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("openrouter_api_key", "openrouter_api_key_sonar_search"),
    )
    chat_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("chat_api_key", "openrouter_gpt_llm"),
    )
    ranking_model: str = "openai/gpt-4o-mini"
    chat_model: str = "openai/gpt-oss-120b:free"

    # Apply-link pipeline
    search_region: str = "us"
    search_results_per_query: int = 10
    max_candidates: int = 12
    search_delay: float = 0.2
    search_timeout: float = 30.0
    validate_apply_links: bool = False

    # API
    cors_origins: str = "http://localhost:3000"
    rate_limit: str = "20/minute"
    rate_limit_enabled: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )


settings = Settings()
