"""
Configuration settings for the Quote Service.

Uses Pydantic Settings to load environment variables for the upstream quote
API, the recipients database, logging, and the HTTP server. The settings
object is built once at startup and handed to the collaborators explicitly.
"""
from __future__ import annotations

from functools import lru_cache

from psycopg.conninfo import make_conninfo
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Upstream quote API
    quote_api_url: str = Field("http://api.forismatic.com/api/1.0/", alias="QUOTE_API_URL")
    quote_api_timeout_seconds: float = Field(30.0, alias="QUOTE_API_TIMEOUT_SECONDS")
    quote_api_max_connections: int = Field(20, alias="QUOTE_API_MAX_CONNECTIONS")

    # Database
    db_host: str = Field("localhost", alias="DB_HOST")
    db_port: int = Field(5432, alias="DB_PORT")
    db_user: str = Field("postgres", alias="DB_USER")
    db_password: str = Field("postgres", alias="DB_PASSWORD")
    db_name: str = Field("quotes", alias="DB_NAME")
    db_sslmode: str = Field("disable", alias="DB_SSLMODE")
    db_pool_min_size: int = Field(1, alias="DB_POOL_MIN_SIZE")
    db_pool_max_size: int = Field(10, alias="DB_POOL_MAX_SIZE")

    # Recipients
    recipients_strict_scan: bool = Field(False, alias="RECIPIENTS_STRICT_SCAN")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # HTTP server
    server_host: str = Field("0.0.0.0", alias="SERVER_HOST")
    server_port: int = Field(8080, alias="SERVER_PORT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


def build_dsn(settings: Settings) -> str:
    """
    Compose a libpq connection string from settings.
    """
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        user=settings.db_user,
        password=settings.db_password,
        dbname=settings.db_name,
        sslmode=settings.db_sslmode,
    )


__all__ = ["Settings", "build_dsn", "get_settings"]
