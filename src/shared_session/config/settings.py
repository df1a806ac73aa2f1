"""
Configuration management for shared-session.

Settings are read from environment variables prefixed with ``SHARED_SESSION_``
and from an optional ``.env`` file.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_config import LogFormat, LogLevel


class SharedSessionSettings(BaseSettings):
    """Settings for the shared session permission runtime."""
    
    model_config = SettingsConfigDict(
        env_prefix="SHARED_SESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Redis Configuration
    redis_url: str = Field(default="redis://localhost:6379/0")
    redis_socket_timeout: Optional[float] = Field(default=None, gt=0)
    redis_decode_responses: bool = Field(default=True)
    
    # Key layout
    permission_key_prefix: str = Field(default="shared_session", min_length=1)
    session_key_prefix: str = Field(default="shared_session", min_length=1)
    
    # Fan-out
    fanout_max_concurrency: int = Field(default=1, ge=1)
    
    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: LogFormat = Field(default=LogFormat.SIMPLE)
    
    @field_validator("redis_url")
    @classmethod
    def validate_redis_url(cls, value: str) -> str:
        if not value.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError("Redis URL must use the redis://, rediss:// or unix:// scheme")
        return value
    
    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value
    
    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, value):
        return value.lower() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> SharedSessionSettings:
    """Get cached settings instance."""
    return SharedSessionSettings()
