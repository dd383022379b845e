"""Application settings using Pydantic."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.models import BoardCredentials


GOOGLE_CHAT_WEBHOOK_PREFIX = "https://chat.googleapis.com/v1/spaces/"


class TrelloSettings(BaseSettings):
    """Trello API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRELLO_",
        extra="ignore",
    )

    api_key: Optional[SecretStr] = Field(default=None)
    token: Optional[SecretStr] = Field(default=None)
    base_url: str = Field(default="https://api.trello.com/1")
    timeout: float = Field(default=10.0)

    def credentials(self) -> Optional[BoardCredentials]:
        """Build per-call credentials, or None if not configured."""
        if not self.api_key or not self.token:
            return None
        return BoardCredentials(
            api_key=self.api_key.get_secret_value(),
            token=self.token.get_secret_value(),
        )


class GoogleChatSettings(BaseSettings):
    """Google Chat delivery configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GOOGLE_CHAT_",
        extra="ignore",
    )

    webhook_prefix: str = Field(default=GOOGLE_CHAT_WEBHOOK_PREFIX)
    timeout: float = Field(default=10.0)


class AuthSettings(BaseSettings):
    """Token authentication configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        extra="ignore",
    )

    jwt_secret: Optional[SecretStr] = Field(default=None)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=24 * 60)


class DatabaseSettings(BaseSettings):
    """Database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        extra="ignore",
    )

    url: str = Field(default="sqlite+aiosqlite:///./cardrelay.db")
    echo: bool = Field(default=False)


class MessageSettings(BaseSettings):
    """Notification message formatting."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MESSAGE_",
        extra="ignore",
    )

    timezone: str = Field(default="Asia/Jakarta")
    date_format: str = Field(default="%d/%m/%Y")
    link_label: str = Field(default="Link Presensi")


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)
    log_level: str = Field(default="INFO")
    # Comma-separated list of allowed CORS origins
    cors_origins: str = Field(default="")
    rate_limit_enabled: bool = Field(default=True)
    rate_limit_max_requests: int = Field(default=100)
    rate_limit_window_seconds: int = Field(default=15 * 60)

    def get_cors_origins(self) -> list[str]:
        """Get list of allowed CORS origins."""
        if not self.cors_origins:
            return []
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def get_rate_limit(self) -> str:
        """Get the per-client request limit as a limit string."""
        return f"{self.rate_limit_max_requests}/{self.rate_limit_window_seconds} seconds"

    # Nested settings - manually create to avoid env prefix issues
    @property
    def trello(self) -> TrelloSettings:
        return TrelloSettings()

    @property
    def google_chat(self) -> GoogleChatSettings:
        return GoogleChatSettings()

    @property
    def auth(self) -> AuthSettings:
        return AuthSettings()

    @property
    def database(self) -> DatabaseSettings:
        return DatabaseSettings()

    @property
    def message(self) -> MessageSettings:
        return MessageSettings()


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
