"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from activation.presentation import routes as activation_routes
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import (
    get_backend_settings,
    get_routing_settings,
    get_settings,
    get_tenancy_settings,
)
from infrastructure.version import __version__
from routing.presentation import RoutingMiddleware
from tenancy.dependencies import get_tenant_resolver
from tenancy.infrastructure.slug_store import TenantSlugStore
from tenancy.presentation import routes as tenancy_routes


@asynccontextmanager
async def tenantgate_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Startup/shutdown events
    - Dropping cached tenant records on shutdown
    """
    settings = get_settings()
    configure_logging(debug=settings.debug, app_name=settings.app_name)
    probe = DefaultStartupProbe()

    tenancy = get_tenancy_settings()
    if tenancy.cache_ttl_seconds > 0:
        probe.tenant_cache_enabled(ttl_seconds=tenancy.cache_ttl_seconds)
    if not get_routing_settings().session_cookie_name:
        probe.edge_auth_unknown()
    probe.application_started(
        version=__version__,
        backend_url=get_backend_settings().base_url,
    )

    yield

    get_tenant_resolver().invalidate()
    probe.application_stopped()


def create_slug_store() -> TenantSlugStore:
    """Build the slug carrier shared by the middleware and the routes."""
    tenancy = get_tenancy_settings()
    return TenantSlugStore(
        cookie_name=tenancy.slug_cookie_name,
        max_age_seconds=tenancy.slug_cookie_max_age_seconds,
        secure=tenancy.slug_cookie_secure,
    )


app = FastAPI(
    title=get_settings().app_name,
    description="Tenant-aware routing and activation for a multi-tenant dashboard",
    version=__version__,
    lifespan=tenantgate_lifespan,
)

app.add_middleware(
    RoutingMiddleware,
    slug_store=create_slug_store(),
    settings=get_routing_settings(),
)

# Include Tenancy bounded context routes
app.include_router(tenancy_routes.router)

# Include Activation bounded context routes
app.include_router(activation_routes.router)

# Tenant-scoped page shells last so /api routes win
app.include_router(tenancy_routes.shell_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
