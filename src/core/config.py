"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "momo-gateway"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # MoMo Collection API
    momo_base_url: str = "https://sandbox.momodeveloper.mtn.com"
    momo_collection_primary_key: str | None = None
    momo_collection_user_id: str = ""
    momo_collection_api_key: str = ""
    momo_collection_subscription_key: str = ""
    momo_target_environment: str = "sandbox"
    momo_api_timeout: float = 30.0
    momo_send_callback_url: bool = False

    callback_url: str = "https://your-app.vercel.app/callback"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
