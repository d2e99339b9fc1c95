"""
Style assistant settings (pydantic-settings).

Values come from the process environment and an optional .env file in
the working directory. get_settings() returns the cached instance;
tests build isolated instances with get_settings_for_testing().
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Optional environment variables:
        - SUPABASE_URL / SUPABASE_SERVICE_KEY: catalog datastore credentials
        - CATALOG_BACKEND: "supabase" (default) or "memory"
        - CATALOG_SEED_PATH: JSON product records for the memory backend
        - OPENAI_API_KEY: enables live style suggestions (fallbacks otherwise)
        - ENVIRONMENT: Environment name (development, staging, production)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    # ==========================================================================
    # Server Configuration
    # ==========================================================================
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    cors_origins: List[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        description="Allowed CORS origins"
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # ==========================================================================
    # Catalog
    # ==========================================================================
    supabase_url: str = Field(default="", description="Supabase project URL")
    supabase_service_key: str = Field(default="", description="Supabase service role key")
    catalog_backend: str = Field(
        default="supabase",
        description="Catalog implementation: 'supabase' or 'memory'"
    )
    catalog_seed_path: Optional[Path] = Field(
        default=None,
        description="JSON file of product records loaded by the memory backend"
    )

    @field_validator("catalog_backend", mode="before")
    @classmethod
    def parse_catalog_backend(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            if v not in ("supabase", "memory"):
                raise ValueError("catalog_backend must be 'supabase' or 'memory'")
        return v

    # ==========================================================================
    # OpenAI (style suggestions and advice)
    # ==========================================================================
    openai_api_key: str = Field(default="", description="OpenAI API key for style suggestions")
    openai_model: str = Field(
        default="gpt-3.5-turbo",
        description="Chat completions model used for colors and advice"
    )
    openai_base_url: Optional[str] = Field(
        default=None,
        description="Override for OpenAI-compatible endpoints"
    )
    openai_timeout_seconds: float = Field(
        default=30.0,
        description="Transport timeout for a single completion call (seconds)"
    )
    style_ai_enabled: bool = Field(
        default=True,
        description="Use the live AI client (falls back to static palettes/templates if off)"
    )

    @property
    def is_ai_configured(self) -> bool:
        return self.style_ai_enabled and bool(self.openai_api_key)

    # ==========================================================================
    # Recommendations
    # ==========================================================================
    max_recommendations: int = Field(
        default=12,
        ge=1,
        le=12,
        description="Maximum products returned per recommendation"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the cached settings instance.

    Call get_settings.cache_clear() after changing the environment
    (tests do this) to force a reload.
    """
    return Settings()


def get_settings_for_testing(**overrides) -> Settings:
    """
    Create a settings instance for testing with optional overrides.

    This bypasses the cache and the .env file so tests get a predictable
    configuration: in-memory catalog, AI disabled.
    """
    test_defaults = {
        "environment": "testing",
        "debug": True,
        "catalog_backend": "memory",
        "openai_api_key": "",
        "style_ai_enabled": False,
    }
    test_defaults.update(overrides)

    return Settings(_env_file=None, **test_defaults)
