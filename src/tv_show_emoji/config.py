"""Configuration settings for tv-show-emoji."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tv_show_emoji.domain.catalog import MAX_EMOJI_COUNT, MIN_EMOJI_COUNT


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Ollama
    ollama_url: str = Field(
        default="http://localhost:11434",
        description="Ollama API base URL",
    )
    ollama_model: str = Field(
        default="llama3.2",
        description="Model used when --model is not given",
    )
    ollama_timeout: float = Field(
        default=60,
        gt=0,
        description="Timeout for one generate request in seconds",
    )
    ollama_tags_timeout: float = Field(
        default=10,
        gt=0,
        description="Timeout for listing installed models in seconds",
    )
    fallback_models: list[str] = Field(
        default_factory=lambda: [
            "llama3.2:latest",
            "llama3.1:latest",
            "llama3:latest",
            "mistral:latest",
        ],
        description="Models tried in order when the requested one is not installed",
    )

    # Suggestions
    default_emoji_count: int = Field(
        default=5,
        ge=MIN_EMOJI_COUNT,
        le=MAX_EMOJI_COUNT,
        description="Emoji count used when --count is not given",
    )
    max_parse_retries: int = Field(
        default=1,
        ge=0,
        description="Extra model calls made when a response cannot be parsed",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Log format (json or console)")
