"""Application configuration via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Contentstack delivery credentials (all three required for live content)
    contentstack_api_key: str = ""
    contentstack_delivery_token: str = ""
    contentstack_environment: str = ""

    # Contentstack region host, e.g. eu-cdn.contentstack.com
    contentstack_host: str = "cdn.contentstack.io"
    cms_timeout_seconds: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @property
    def contentstack_configured(self) -> bool:
        return bool(
            self.contentstack_api_key
            and self.contentstack_delivery_token
            and self.contentstack_environment
        )
