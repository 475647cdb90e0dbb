"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ApiConfig(BaseSettings):
    """HTTP API configuration."""

    model_config = {"env_prefix": "CLINIVET_API_"}

    title: str = "Clinivet Practice API"
    api_prefix: str = "/api"


class RedisConfig(BaseSettings):
    """Redis-backed pet directory configuration."""

    model_config = {"env_prefix": "CLINIVET_REDIS_"}

    enabled: bool = False  # False -> in-memory directory
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    key_prefix: str = "clinivet"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CLINIVET_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_json: bool = False

    api: ApiConfig = Field(default_factory=ApiConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)
