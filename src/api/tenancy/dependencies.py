"""Tenant context FastAPI dependencies.

Resolves the ``{org_slug}`` path parameter of tenant-scoped endpoints
through the shared tenant resolver.

- A slug that names no tenant (stale or forged cookie, old link) sends page
  requests to the no-tenant page and JSON requests to a 404.
- An unavailable backend does not evict the user: the request continues
  with a degraded context (no tenant id) and the slug carrier is left alone.

Usage in FastAPI routes:
    @router.get("/org/{org_slug}")
    async def example(
        tenant: Annotated[TenantContext, Depends(get_tenant_context)],
    ):
        # tenant.slug is the backend's current slug
        ...
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status

from infrastructure.settings import (
    BackendSettings,
    RoutingSettings,
    TenancySettings,
    get_backend_settings,
    get_routing_settings,
    get_tenancy_settings,
)
from shared_kernel.middleware.observability import DefaultTenantContextProbe
from shared_kernel.middleware.observability.tenant_context_probe import (
    TenantContextProbe,
)
from shared_kernel.middleware.tenant_context import TenantContext
from shared_kernel.observability_context import ObservationContext
from tenancy.infrastructure.caching_resolver import CachingTenantResolver
from tenancy.infrastructure.membership_lookup import HttpMembershipLookup
from tenancy.infrastructure.slug_store import TenantSlugStore
from tenancy.infrastructure.tenant_resolver import HttpTenantResolver
from tenancy.ports.exceptions import TenantNotFoundError, TenantUnavailableError
from tenancy.ports.memberships import MembershipLookup
from tenancy.ports.resolvers import TenantResolver


@lru_cache
def get_tenant_resolver() -> TenantResolver:
    """Get the process-wide tenant resolver.

    Every tenant-scoped call site shares this instance. Caching is only
    layered on when a positive TTL is configured.
    """
    backend = get_backend_settings()
    tenancy = get_tenancy_settings()

    resolver: TenantResolver = HttpTenantResolver(
        base_url=backend.base_url,
        timeout_seconds=backend.timeout_seconds,
    )
    if tenancy.cache_ttl_seconds > 0:
        resolver = CachingTenantResolver(
            inner=resolver,
            ttl=timedelta(seconds=tenancy.cache_ttl_seconds),
        )
    return resolver


def get_membership_lookup(
    settings: Annotated[BackendSettings, Depends(get_backend_settings)],
) -> MembershipLookup:
    """Dependency for the backend membership lookup."""
    return HttpMembershipLookup(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
    )


def get_slug_store(
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> TenantSlugStore:
    """Dependency for the tenant slug carrier."""
    return TenantSlugStore(
        cookie_name=settings.slug_cookie_name,
        max_age_seconds=settings.slug_cookie_max_age_seconds,
        secure=settings.slug_cookie_secure,
    )


def get_tenant_context_probe() -> TenantContextProbe:
    """Dependency for the tenant context probe."""
    return DefaultTenantContextProbe()


async def resolve_tenant_context(
    org_slug: str,
    resolver: TenantResolver,
    probe: TenantContextProbe,
    context: ObservationContext | None = None,
) -> TenantContext:
    """Resolve a path slug into a tenant context.

    This is the core logic shared by the page and JSON dependencies.

    Args:
        org_slug: The ``{org_slug}`` path segment.
        resolver: The shared tenant resolver.
        probe: Domain probe for observability.
        context: Request-scoped observation context; the resolved tenant
            is bound onto it for the resolution event.

    Returns:
        TenantContext with source 'lookup', or 'degraded' when the backend
        was unavailable.

    Raises:
        TenantNotFoundError: If the slug names no tenant.
    """
    try:
        record = await resolver.resolve(org_slug)
    except TenantNotFoundError:
        probe.tenant_context_not_found(slug=org_slug)
        raise
    except TenantUnavailableError as e:
        probe.tenant_context_degraded(slug=org_slug, reason=e.reason)
        return TenantContext(slug=org_slug, tenant_id=None, source="degraded")

    context = (context or ObservationContext()).with_tenant(
        tenant_id=record.id.value,
        tenant_slug=record.slug.value,
    )
    probe.with_context(context).tenant_context_resolved(
        slug=org_slug,
        record_slug=record.slug.value,
    )
    return TenantContext(
        slug=record.slug.value,
        tenant_id=record.id.value,
        source="lookup",
    )


async def get_tenant_context(
    org_slug: str,
    resolver: Annotated[TenantResolver, Depends(get_tenant_resolver)],
    probe: Annotated[TenantContextProbe, Depends(get_tenant_context_probe)],
    settings: Annotated[RoutingSettings, Depends(get_routing_settings)],
) -> TenantContext:
    """Tenant context for page requests.

    Raises:
        HTTPException: Redirect to the no-tenant page if the slug names
            no tenant.
    """
    try:
        return await resolve_tenant_context(org_slug, resolver, probe)
    except TenantNotFoundError:
        raise HTTPException(
            status_code=settings.redirect_status_code,
            detail="Organization not found",
            headers={"Location": settings.no_tenant_path},
        )


async def get_api_tenant_context(
    org_slug: str,
    resolver: Annotated[TenantResolver, Depends(get_tenant_resolver)],
    probe: Annotated[TenantContextProbe, Depends(get_tenant_context_probe)],
) -> TenantContext:
    """Tenant context for JSON endpoints.

    Raises:
        HTTPException 404: If the slug names no tenant.
    """
    try:
        return await resolve_tenant_context(org_slug, resolver, probe)
    except TenantNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Organization '{org_slug}' not found",
        )
