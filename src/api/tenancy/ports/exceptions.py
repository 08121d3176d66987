"""Exceptions for tenant resolution.

Callers branch on the two concrete subclasses: a missing tenant is sent to
the no-tenant experience, an unavailable backend degrades to a best-effort
render without touching the slug carrier.
"""


class TenantResolutionError(Exception):
    """Base class for failures of the slug-to-record resolution."""

    def __init__(self, slug: str, message: str) -> None:
        super().__init__(message)
        self.slug = slug


class TenantNotFoundError(TenantResolutionError):
    """Raised when a slug does not correspond to any tenant.

    This is a definitive answer from the backend (or a slug that cannot
    name a tenant at all), distinct from a transport failure.
    """

    def __init__(self, slug: str) -> None:
        super().__init__(slug, f"Tenant not found for slug: {slug!r}")


class TenantUnavailableError(TenantResolutionError):
    """Raised when the lookup could not be completed.

    The tenant's existence is unknown: the backend timed out, was
    unreachable, or answered with something that is not a tenant record.
    """

    def __init__(self, slug: str, reason: str) -> None:
        super().__init__(slug, f"Tenant lookup unavailable for {slug!r}: {reason}")
        self.reason = reason


class MembershipLookupError(Exception):
    """Raised when the user's organization memberships could not be listed."""

    pass
