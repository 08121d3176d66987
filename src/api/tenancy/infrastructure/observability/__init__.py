"""Observability for tenancy infrastructure."""

from tenancy.infrastructure.observability.membership_probe import (
    DefaultMembershipLookupProbe,
    MembershipLookupProbe,
)
from tenancy.infrastructure.observability.resolver_probe import (
    DefaultTenantResolverProbe,
    TenantResolverProbe,
)

__all__ = [
    "DefaultMembershipLookupProbe",
    "DefaultTenantResolverProbe",
    "MembershipLookupProbe",
    "TenantResolverProbe",
]
