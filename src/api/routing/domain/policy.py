"""Redirect policy engine.

Computes the routing decision for one request from its category, the
carried tenant slug and the edge auth status. Pure and network-free: the
slug's presence is checked here, its validity is checked later by whichever
tenant-scoped endpoint serves the rewritten path.
"""

from __future__ import annotations

from routing.domain.classifier import tenant_scoped_path
from routing.domain.value_objects import (
    Allow,
    AuthStatus,
    RedirectToAuth,
    RedirectToNoTenant,
    RewriteTo,
    RouteCategory,
    RoutingDecision,
)


def decide(
    category: RouteCategory,
    slug: str | None,
    auth: AuthStatus,
    path: str,
) -> RoutingDecision:
    """Decide how to route a request.

    Public assets, API endpoints, tenant-scoped paths and auth pages are
    always allowed. Legacy and unclassified paths are protected:

    1. an anonymous caller is sent to the auth page with ``path`` as the
       return path (never rewritten into a tenant-scoped URL first);
    2. otherwise, without a slug the caller is sent to the no-tenant page;
    3. otherwise the path is rewritten to ``/org/<slug><path>``.

    Args:
        category: Category from ``classify``.
        slug: Tenant slug from the carrier, or None when absent.
        auth: What the edge knows about the caller.
        path: Original path including any query string.

    Returns:
        The routing decision.
    """
    if not category.is_protected:
        return Allow()

    if auth is AuthStatus.ANONYMOUS:
        return RedirectToAuth(return_path=path)

    if not slug:
        return RedirectToNoTenant()

    return RewriteTo(path=tenant_scoped_path(slug, path))
