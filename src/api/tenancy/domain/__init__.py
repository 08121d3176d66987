"""Tenancy domain layer."""

from tenancy.domain.memberships import OrgMembership, find_membership, select_current
from tenancy.domain.value_objects import TenantId, TenantRecord, TenantSlug

__all__ = [
    "OrgMembership",
    "TenantId",
    "TenantRecord",
    "TenantSlug",
    "find_membership",
    "select_current",
]
