"""Application settings management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings loaded from environment variables."""

    app_name: str = "URL Shortener Bot"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    bot_token: str | None = Field(default=None, alias="BOT_TOKEN")
    telegram_api_base_url: str = Field(default="https://api.telegram.org", alias="TELEGRAM_API_BASE_URL")

    shorten_service_url: str = Field(default="http://www.shh.ct.ws/shorten.php", alias="SHORTEN_SERVICE_URL")
    short_url_host: str = Field(default="shh.ct.ws", alias="SHORT_URL_HOST")
    shorten_timeout_seconds: float = Field(default=15.0, alias="SHORTEN_TIMEOUT_SECONDS")

    # When enabled, slash commands bypass the active conversation state instead
    # of being evaluated after it.
    exclusive_command_dispatch: bool = Field(default=False, alias="EXCLUSIVE_COMMAND_DISPATCH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid",
    )


settings = Settings()
