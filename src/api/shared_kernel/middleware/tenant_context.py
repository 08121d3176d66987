"""Tenant context value object for resolved tenant identification.

This module contains the pure value object that represents the tenant a
tenant-scoped request runs under. It is framework-agnostic and contains
no business logic, making it safe for the shared kernel.

The actual resolution logic (slug lookup, not-found redirects, degraded
fallback) lives in the tenancy bounded context's dependency layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant context for the current request.

    This is a shared kernel value object used across bounded contexts
    to carry the resolved tenant identity.

    Attributes:
        slug: The tenant slug to use for any link built from here on. After
            a successful lookup this is the backend's current slug.
        tenant_id: The backend tenant identifier, or None when degraded.
        source: 'lookup' if the backend resolved the slug, 'degraded' if
            the backend was unavailable and the request renders best-effort.
    """

    slug: str
    tenant_id: str | None
    source: Literal["lookup", "degraded"]

    @property
    def is_degraded(self) -> bool:
        """Whether the tenant could not be verified for this request."""
        return self.source == "degraded"
