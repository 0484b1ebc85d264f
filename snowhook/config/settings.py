"""
Application settings and configuration management.
"""

import logging
from functools import lru_cache
from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_FILE = "config/servicenow.yml"
DEFAULT_LISTEN_ADDRESS = ":9877"


def parse_listen_address(address: str) -> Tuple[str, int]:
    """
    Split a ``host:port`` listen address into its parts.
    
    An empty host (``:9877``) means all interfaces. IPv6 hosts may be
    bracketed (``[::1]:9877``).
    
    Raises:
        ValueError: If the address has no port or the port is not a valid number
    """
    host, sep, port = address.strip().rpartition(":")
    if not sep:
        raise ValueError(f"Listen address '{address}' is missing a port")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"Invalid port in listen address '{address}'") from None
    if not 0 < port_number < 65536:
        raise ValueError(f"Port out of range in listen address '{address}'")
    return host or "0.0.0.0", port_number


class Settings(BaseSettings):
    """Application settings."""
    
    config_file: str = Field(
        default=DEFAULT_CONFIG_FILE,
        description="Path to the ServiceNow configuration file"
    )
    listen_address: str = Field(
        default=DEFAULT_LISTEN_ADDRESS,
        description="The address to listen on for HTTP requests"
    )
    log_level: str = Field(default="INFO")
    servicenow_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for a single ServiceNow API call"
    )
    
    @field_validator('listen_address', mode='after')
    @classmethod
    def validate_listen_address(cls, v: str) -> str:
        """Fail at startup rather than when uvicorn tries to bind."""
        parse_listen_address(v)
        return v.strip()
    
    @field_validator('config_file', mode='after')
    @classmethod
    def strip_config_file(cls, v: str) -> str:
        return v.strip()
    
    @field_validator('log_level', mode='after')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Reject unknown levels here so SNOWHOOK_LOG_LEVEL typos fail like bad flags."""
        level = v.strip().upper()
        if level not in logging._nameToLevel:
            raise ValueError(f"Invalid log level: {v}")
        return level
    
    @property
    def listen_host(self) -> str:
        return parse_listen_address(self.listen_address)[0]
    
    @property
    def listen_port(self) -> int:
        return parse_listen_address(self.listen_address)[1]
    
    model_config = SettingsConfigDict(
        env_prefix="SNOWHOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
