from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # LLM provider selection
    llm_provider: str = Field("gemini", alias="LLM_PROVIDER")
    llm_temperature: Optional[float] = Field(default=None, alias="LLM_TEMPERATURE")
    llm_timeout_seconds: Optional[float] = Field(
        default=None,
        alias="LLM_TIMEOUT_SECONDS",
        description="Client-side timeout for the model call. Unset leaves it to the transport.",
    )

    # Gemini
    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    gemini_model: str = Field("gemini-2.5-flash", alias="GEMINI_MODEL")

    # OpenAI
    openai_api_key: Optional[str] = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field("gpt-4o", alias="OPENAI_MODEL")

    # Prompt shaping
    default_output_language: str = Field("Bahasa Indonesia", alias="DEFAULT_OUTPUT_LANGUAGE")
    strict_schema: bool = Field(
        False,
        alias="STRICT_SCHEMA",
        description="If true, structured output must match StructuredPrompt or the request fails.",
    )

    # HTTP server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8080, alias="PORT")
    static_dir: Optional[str] = Field(
        default=None,
        alias="STATIC_DIR",
        description="Directory with the frontend files, served at / by the server variant.",
    )
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ALLOW_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
