"""Service configuration using pydantic-settings"""

from typing import Dict, Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.step_config import DEFAULT_COOKIE_NAME, SSO_COOKIE_NAME_OPTION


class Settings(BaseSettings):
    """SSO hint service configuration from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Step configuration
    sso_cookie_name: str = Field(
        default=DEFAULT_COOKIE_NAME,
        description="Name of the cookie holding the last used identity provider alias",
    )
    public_base_url: Optional[str] = Field(
        default=None,
        description="Public base URL of the auth server. Falls back to the request base URL.",
    )

    # Identity provider registry
    idp_registry_backend: Literal["memory", "redis", "admin-api"] = Field(
        default="memory",
        description="Identity provider registry backend",
    )
    idp_registry_seed: str = Field(
        default="",
        description="Memory backend seed: comma-separated realm:alias[:disabled] entries",
    )
    admin_api_url: Optional[str] = Field(
        default=None,
        description="Base URL of the admin REST API (admin-api backend)",
    )
    admin_api_token: Optional[str] = Field(
        default=None,
        description="Bearer token for the admin REST API",
    )
    idp_cache_ttl: int = Field(
        default=60,
        description="Seconds a remote identity provider lookup stays cached",
    )
    idp_cache_size: int = Field(
        default=1024,
        description="Maximum number of remote identity provider lookups kept in cache",
    )

    # Redis
    redis_mode: Literal["standalone", "sentinel"] = Field(
        default="standalone",
        description="Redis deployment mode",
    )
    redis_host: str = Field(default="localhost", description="Redis host (standalone)")
    redis_port: int = Field(default=6379, description="Redis port (standalone)")
    redis_password: Optional[str] = Field(default=None, description="Redis password")
    redis_db: int = Field(default=0, description="Redis database index")
    redis_sentinel_hosts: str = Field(
        default="localhost:26379",
        description="Comma-separated host:port list of Redis sentinels",
    )
    redis_master_set: str = Field(default="mymaster", description="Sentinel master name")

    # Session codes
    access_code_secret: str = Field(
        default="change-me",
        description="HS256 signing key for session codes",
    )
    access_code_ttl: int = Field(
        default=300,
        description="Session code lifetime in seconds",
    )

    # Hint cookie written after a successful SSO login
    sso_cookie_domain: Optional[str] = Field(
        default=None,
        description="Domain attribute of the hint cookie",
    )
    sso_cookie_secure: bool = Field(
        default=True,
        description="Whether the hint cookie is sent over HTTPS only",
    )

    # Service
    service_host: str = Field(default="0.0.0.0", description="Service bind host")
    service_port: int = Field(default=8080, description="Service bind port")

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @property
    def step_config(self) -> Dict[str, str]:
        """Configuration handed to the SSO hint step"""
        return {SSO_COOKIE_NAME_OPTION: self.sso_cookie_name}


# Singleton settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings singleton"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
