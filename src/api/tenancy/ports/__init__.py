"""Tenancy ports: the resolution contract and its failure taxonomy."""

from tenancy.ports.exceptions import (
    MembershipLookupError,
    TenantNotFoundError,
    TenantResolutionError,
    TenantUnavailableError,
)
from tenancy.ports.memberships import MembershipLookup
from tenancy.ports.resolvers import TenantResolver

__all__ = [
    "MembershipLookup",
    "MembershipLookupError",
    "TenantNotFoundError",
    "TenantResolutionError",
    "TenantResolver",
    "TenantUnavailableError",
]
