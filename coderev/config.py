"""Configuration for the CodeRev review service."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    environment: str = Field(default="development")
    debug: bool = Field(default=True)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # LLM - Gemini through its OpenAI-compatible endpoint
    gemini_api_key: Optional[str] = Field(default=None)
    llm_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta/openai/")
    review_model: str = Field(default="gemini-2.5-flash")
    llm_timeout_seconds: Optional[float] = Field(default=None)

    # Context gathering
    max_context_chars: int = Field(default=50000)
    clone_depth: int = Field(default=1)
    clone_timeout_seconds: Optional[float] = Field(default=None)
    workspace_prefix: str = Field(default="coderev-")
    repository_url_schemes: list[str] = Field(default=["https", "http", "ssh", "git"])


settings = Settings()
