"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Dict, List, Optional

from pydantic import AliasChoices, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    # App settings
    app_name: str = "Text Summarizer"
    debug: bool = False

    # Authentication settings
    require_api_key: bool = False  # Set to True to enable apikey header authentication

    # API Keys for authentication (comma-separated string in env)
    api_keys_str: str = Field(default="", alias="api_keys")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def api_keys(self) -> List[str]:
        """Parse comma-separated API keys."""
        return [k.strip() for k in self.api_keys_str.split(",") if k.strip()]

    # AI gateway (OpenAI-compatible chat completions)
    ai_gateway_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("ai_gateway_api_key", "lovable_api_key"),
    )
    ai_gateway_base_url: str = "https://ai.gateway.lovable.dev/v1"
    summary_model: str = "google/gemini-2.5-flash"
    request_timeout_seconds: float = 60.0

    # Input limits
    max_input_chars: int = 8000  # Only this many characters are sent upstream
    max_upload_bytes: int = 10 * 1024 * 1024

    # CORS
    cors_allow_origin: str = "*"
    cors_allow_headers: str = "authorization, x-client-info, apikey, content-type"

    @property
    def cors_headers(self) -> Dict[str, str]:
        """Headers attached to every summarization response."""
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Headers": self.cors_allow_headers,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
