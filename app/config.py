"""
Application configuration.
Settings are read from the process environment and a local .env file.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_NAME = "employee_records"
DEFAULT_PORT = 3000
DEFAULT_STATIC_DIRS = ["client/build", "dist/FrontEnd"]


class Settings(BaseSettings):
    """Runtime settings for the API service."""

    # Unknown keys in .env are left to other tools
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MONGO_URI: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("MONGO_URI", "MONGO_URL"),
    )
    DB_NAME: str = DEFAULT_DB_NAME
    HOST: str = "0.0.0.0"
    PORT: int = DEFAULT_PORT

    # List fields accept a JSON array or a comma-separated string
    CORS_ORIGINS: List[str] | str = Field(default_factory=lambda: ["*"])
    STATIC_DIRS: List[str] | str = Field(default_factory=lambda: list(DEFAULT_STATIC_DIRS))

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    MONGO_TIMEOUT_MS: int = 5000

    @field_validator("MONGO_URI", mode="before")
    @classmethod
    def _empty_uri_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("CORS_ORIGINS", "STATIC_DIRS", mode="before")
    @classmethod
    def _split_csv(cls, value):
        if isinstance(value, str):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def _lower_format(cls, value):
        return value.lower() if isinstance(value, str) else value

    @property
    def database_configured(self) -> bool:
        return bool(self.MONGO_URI)


@lru_cache
def _cached_settings() -> Settings:
    return Settings()


def get_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        env_file: Optional path of a .env file (defaults to ./.env)

    Returns:
        Settings instance, cached when read from the default .env

    Raises:
        pydantic.ValidationError: If a value cannot be parsed
    """
    if env_file is None:
        return _cached_settings()
    return Settings(_env_file=env_file)
