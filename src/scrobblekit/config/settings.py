"""Application settings loaded from environment variables and .env."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


# Hey future me, api_key/api_secret come from https://www.last.fm/api/account/create. The
# session_key is what LastfmAuthService.get_session() hands back; store it once and scrobbling
# works forever (Last.fm session keys don't expire). All of this is read from LASTFM_* env vars.
class LastfmSettings(BaseSettings):
    """Last.fm API configuration."""

    model_config = SettingsConfigDict(env_prefix="LASTFM_", env_file=".env", extra="ignore")

    api_key: str = Field(default="", description="Last.fm API key")
    api_secret: str = Field(default="", description="Last.fm shared secret")
    session_key: str | None = Field(default=None, description="Session key for authenticated calls")
    base_url: str = Field(default="https://ws.audioscrobbler.com/2.0/", description="API endpoint")
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    user_agent: str = Field(
        default="scrobblekit/0.1.0 (+https://github.com/scrobblekit/scrobblekit)",
        description="User-Agent sent with every request",
    )

    @field_validator("session_key")
    @classmethod
    def _blank_session_key_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    def is_configured(self) -> bool:
        """Check if API key and secret are both set."""
        return bool(self.api_key.strip() and self.api_secret.strip())


class ObservabilitySettings(BaseSettings):
    """Logging output configuration."""

    model_config = SettingsConfigDict(env_prefix="OBSERVABILITY_", env_file=".env", extra="ignore")

    log_json_format: bool = Field(default=False, description="Emit logs as JSON lines")


class Settings(BaseSettings):
    """Top-level settings."""

    model_config = SettingsConfigDict(env_file=".env", env_nested_delimiter="__", extra="ignore")

    app_name: str = "scrobblekit"
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    lastfm: LastfmSettings = Field(default_factory=LastfmSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance (cached, call get_settings.cache_clear() in tests)."""
    return Settings()
