"""Library settings and configuration."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TraceLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING"]


class Settings(BaseSettings):
    """
    Composer configuration settings.

    Settings can be configured via:

    1. Environment variables (e.g., COMPOSER_VERBOSE=true)
    2. .env file in the working directory
    3. Default values defined below

    All settings use the COMPOSER_ prefix for environment variables.

    .. rubric:: Examples

    Log every pipeline call and trace values at INFO::

        export COMPOSER_VERBOSE=true
        export COMPOSER_TRACE_LEVEL=INFO
    """

    verbose: Annotated[
        bool,
        Field(
            default=False,
            description="If True, every pipeline call logs its signature at DEBUG level.",
        ),
    ]

    trace_level: Annotated[
        TraceLevel,
        Field(
            default="DEBUG",
            description="Log level used by the `trace` combinator",
        ),
    ]

    trace_prefix: Annotated[
        str,
        Field(
            default="trace",
            description="Label prepended to traced values",
            min_length=1,
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="COMPOSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        validate_assignment=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    :return: The library settings instance.
    """
    return Settings()  # type: ignore
