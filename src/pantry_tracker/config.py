"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

RECIPE_SOURCES = frozenset({"static", "supabase"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_store: bool = False
    ai_recipe_count: int = 3
    recipe_source: str = "static"
    timezone: str = "UTC"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_recipe_source(raw: str | None) -> str:
    """Normalize the configured recipe catalog source."""
    if raw is None:
        return "static"
    cleaned = raw.strip().lower()
    if cleaned in RECIPE_SOURCES:
        return cleaned
    return "static"
