"""
blog_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API, auth, and persistence layers.
- Hide secrets (signing key, admin password) from repr/logging.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Read once at process start; treated as immutable afterwards.
    Every field can be overridden with a `BLOG_`-prefixed environment variable.
    """

    model_config = SettingsConfigDict(env_prefix="BLOG_", case_sensitive=False, frozen=True)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "blog-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Credentials
    jwt_alg: Literal["HS256", "HS384", "HS512"] = "HS256"
    jwt_issuer: str = "blog-api"
    jwt_audience: str = "blog-api-clients"
    jwt_secret: str = Field(
        default="dev-only-signing-key-change-me-0123456789",
        min_length=32,
        repr=False,
    )
    jwt_ttl_seconds: int = Field(default=3600, gt=0)

    # Single administrator account accepted by /api/auth/login.
    admin_username: str = "admin"
    admin_password: str = Field(default="admin-change-me", repr=False)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./blog.db"

    # Listing defaults
    default_page_size: int = Field(default=10, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# `jwt_secret` is validated for length here so a short key fails at startup
# rather than on the first login.
