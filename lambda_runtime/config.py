"""
Runtime client configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOGGING_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "logging.yml")


class RuntimeConfig(BaseSettings):
    """
    Configuration management for the runtime client.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOGGING_CONFIG_PATH: str = Field(
        default=DEFAULT_LOGGING_CONFIG_PATH, description="Logging dictConfig YAML path"
    )

    # ===== Runtime API =====
    AWS_LAMBDA_RUNTIME_API: str = Field(
        default="127.0.0.1:7000", description="host:port of the Runtime API"
    )
    RUNTIME_CONNECT_TIMEOUT: float = Field(
        default=5.0, description="Connect timeout for Runtime API requests (seconds)"
    )
    # /invocation/next is a long poll, so no read timeout unless explicitly set
    RUNTIME_REQUEST_TIMEOUT: Optional[float] = Field(
        default=None, description="Read/write timeout for Runtime API requests (seconds)"
    )

    # ===== Runner =====
    MAX_INVOCATIONS: int = Field(
        default=0, ge=0, description="Stop after this many invocations (0 = unlimited)"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    @property
    def runtime_api_base_url(self) -> str:
        return f"http://{self.AWS_LAMBDA_RUNTIME_API}"
