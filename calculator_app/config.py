"""
Configuration management using Pydantic Settings.

Only host/port binding is configurable, through CALCULATOR_* environment variables.
"""
from functools import lru_cache
import ipaddress
from typing import Optional

from pydantic import AnyHttpUrl, Field, IPvAnyAddress
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings shared by the calculation service and the frontend."""

    model_config = SettingsConfigDict(env_prefix="CALCULATOR_", extra="ignore")

    service_host: IPvAnyAddress = Field(default="127.0.0.1", description="Calculation service host")
    service_port: int = Field(default=8000, ge=1, le=65535, description="Calculation service port")
    frontend_host: IPvAnyAddress = Field(default="127.0.0.1", description="Frontend host")
    frontend_port: int = Field(default=8501, ge=1, le=65535, description="Frontend port")
    service_url: Optional[AnyHttpUrl] = Field(
        default=None,
        description="URL the frontend uses to reach the calculation service",
    )

    @property
    def calculation_service_url(self) -> str:
        """Return the configured service URL, or one derived from the service host and port."""
        if self.service_url:
            return str(self.service_url).rstrip("/")
        host = ipaddress.ip_address(str(self.service_host))
        # IPv6 literals must be bracketed inside a URL
        netloc = f"[{host}]" if host.version == 6 else str(host)
        return f"http://{netloc}:{self.service_port}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
