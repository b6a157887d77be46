# jwtgen/config.py
from functools import lru_cache
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Defaults for the jwtgen commands, overridable from the environment.
    """

    JWT_TTL_MINUTES: int = 5
    DEFAULT_PRINCIPAL: str = "nodeId"
    INTERNAL_BEARER_HEADER: str = "X-Trino-Internal-Bearer"
    HTTP_TIMEOUT: float = 30.0
    VERIFY_TLS: bool = False
    LOG_LEVEL: LogLevel = "WARNING"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
