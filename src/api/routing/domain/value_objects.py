"""Value objects for the routing domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Union


class RouteCategory(StrEnum):
    """Category of a request path, computed once per request."""

    PUBLIC_ASSET = "public_asset"
    API_ENDPOINT = "api_endpoint"
    AUTH_PAGE = "auth_page"
    LEGACY_TENANT_PATH = "legacy_tenant_path"
    TENANT_SCOPED_PATH = "tenant_scoped_path"
    UNCLASSIFIED = "unclassified"

    @property
    def is_protected(self) -> bool:
        """Whether requests in this category are gated and tenant-routed."""
        return self in (
            RouteCategory.LEGACY_TENANT_PATH,
            RouteCategory.UNCLASSIFIED,
        )


class AuthStatus(StrEnum):
    """What the edge knows about the caller's identity.

    ``UNKNOWN`` means the edge cannot tell (no session cookie configured);
    the page-level auth gate decides later.
    """

    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Allow:
    """Let the request through unchanged."""


@dataclass(frozen=True)
class RewriteTo:
    """Serve the request from ``path`` without a client-visible redirect.

    ``path`` carries the query string verbatim.
    """

    path: str


@dataclass(frozen=True)
class RedirectToAuth:
    """Send the caller to the auth page, resuming at ``return_path`` later."""

    return_path: str


@dataclass(frozen=True)
class RedirectToNoTenant:
    """Send the caller to the no-tenant (org picker) experience."""


RoutingDecision = Union[Allow, RewriteTo, RedirectToAuth, RedirectToNoTenant]
