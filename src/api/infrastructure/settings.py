"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseSettings):
    """Connection settings for the dashboard REST backend.

    Environment variables:
        TENANTGATE_BACKEND_BASE_URL: Backend base URL (default: http://127.0.0.1:8080)
        TENANTGATE_BACKEND_TIMEOUT_SECONDS: Per-request timeout (default: 15)
    """

    model_config = SettingsConfigDict(
        env_prefix="TENANTGATE_BACKEND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default="http://127.0.0.1:8080",
        description="Base URL of the dashboard backend",
    )
    timeout_seconds: float = Field(
        default=15.0,
        description="Timeout applied to every backend call",
        gt=0,
        le=120,
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the base URL so paths can be appended directly."""
        return value.rstrip("/")


class RoutingSettings(BaseSettings):
    """Redirect and rewrite settings for the routing middleware.

    Environment variables:
        TENANTGATE_ROUTING_LOGIN_PATH: Auth page path (default: /login)
        TENANTGATE_ROUTING_RETURN_PARAM: Return path query parameter (default: next)
        TENANTGATE_ROUTING_NO_TENANT_PATH: No-tenant fallback (default: /org)
        TENANTGATE_ROUTING_SESSION_COOKIE_NAME: Session cookie checked at the
            edge; empty disables the edge auth check (default: session)
        TENANTGATE_ROUTING_REDIRECT_STATUS_CODE: Redirect status (default: 307)
    """

    model_config = SettingsConfigDict(
        env_prefix="TENANTGATE_ROUTING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    login_path: str = Field(default="/login", description="Auth page path")
    return_param: str = Field(
        default="next",
        description="Query parameter carrying the return path",
        min_length=1,
    )
    no_tenant_path: str = Field(
        default="/org",
        description="Where requests without a tenant are sent",
    )
    session_cookie_name: str = Field(
        default="session",
        description="Session cookie name; empty means auth is unknown at the edge",
    )
    redirect_status_code: int = Field(
        default=307,
        description="HTTP status used for routing redirects",
        ge=300,
        le=399,
    )

    @field_validator("login_path", "no_tenant_path")
    @classmethod
    def require_absolute_path(cls, value: str) -> str:
        """Redirect targets must be same-origin absolute paths."""
        if not value.startswith("/") or value.startswith("//"):
            raise ValueError(f"must be an absolute path, got: {value!r}")
        return value


class TenancySettings(BaseSettings):
    """Tenant slug carrier and resolution settings.

    Environment variables:
        TENANTGATE_TENANCY_SLUG_COOKIE_NAME: Carrier cookie (default: __TENANT_SLUG__)
        TENANTGATE_TENANCY_SLUG_COOKIE_MAX_AGE_SECONDS: Carrier lifetime (default: 30 days)
        TENANTGATE_TENANCY_SLUG_COOKIE_SECURE: Mark the carrier Secure (default: false)
        TENANTGATE_TENANCY_CACHE_TTL_SECONDS: Resolver cache TTL, 0 disables (default: 0)
    """

    model_config = SettingsConfigDict(
        env_prefix="TENANTGATE_TENANCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    slug_cookie_name: str = Field(
        default="__TENANT_SLUG__",
        description="Name of the tenant slug cookie",
        min_length=1,
    )
    slug_cookie_max_age_seconds: int = Field(
        default=60 * 60 * 24 * 30,
        description="Lifetime of the tenant slug cookie",
        ge=0,
    )
    slug_cookie_secure: bool = Field(
        default=False,
        description="Whether the tenant slug cookie is sent over HTTPS only",
    )
    cache_ttl_seconds: float = Field(
        default=0.0,
        description="How long resolved tenant records are cached (0 disables)",
        ge=0,
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Tenantgate API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def backend(self) -> BackendSettings:
        """Get backend settings."""
        return get_backend_settings()

    @property
    def routing(self) -> RoutingSettings:
        """Get routing settings."""
        return get_routing_settings()

    @property
    def tenancy(self) -> TenancySettings:
        """Get tenancy settings."""
        return get_tenancy_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_backend_settings() -> BackendSettings:
    """Get cached backend settings."""
    return BackendSettings()


@lru_cache
def get_routing_settings() -> RoutingSettings:
    """Get cached routing settings."""
    return RoutingSettings()


@lru_cache
def get_tenancy_settings() -> TenancySettings:
    """Get cached tenancy settings."""
    return TenancySettings()
