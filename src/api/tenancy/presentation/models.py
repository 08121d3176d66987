"""Pydantic models for tenancy requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from auth.domain.value_objects import CurrentUser
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.domain.memberships import OrgMembership
from tenancy.domain.value_objects import TenantRecord


class SwitchOrgRequest(BaseModel):
    """Request model for switching the active organization."""

    slug: str = Field(
        ...,
        description="Slug of the organization to switch to",
        min_length=1,
        max_length=100,
    )


class TenantResponse(BaseModel):
    """Resolved tenant record."""

    id: str = Field(..., description="Backend tenant identifier")
    slug: str = Field(..., description="Current tenant slug")

    @classmethod
    def from_domain(cls, record: TenantRecord) -> TenantResponse:
        """Convert a domain TenantRecord to an API response."""
        return cls(id=record.id.value, slug=record.slug.value)


class SwitchOrgResponse(BaseModel):
    """Response model for a completed organization switch."""

    tenant: TenantResponse
    redirect_to: str = Field(
        ..., description="Where the client should navigate after switching"
    )


class TenantContextResponse(BaseModel):
    """Tenant context as seen by a tenant-scoped endpoint."""

    slug: str = Field(..., description="Slug to use for links")
    tenant_id: str | None = Field(
        None, description="Backend tenant identifier (absent when degraded)"
    )
    degraded: bool = Field(
        ..., description="True when the tenant could not be verified"
    )

    @classmethod
    def from_context(cls, context: TenantContext) -> TenantContextResponse:
        """Convert a TenantContext to an API response."""
        return cls(
            slug=context.slug,
            tenant_id=context.tenant_id,
            degraded=context.is_degraded,
        )


class UserResponse(BaseModel):
    """Signed-in user summary."""

    id: str
    email: str | None = None
    name: str | None = None
    role: str | None = None

    @classmethod
    def from_domain(cls, user: CurrentUser) -> UserResponse:
        """Convert a CurrentUser to an API response."""
        return cls(id=user.id, email=user.email, name=user.name, role=user.role)


class ShellResponse(BaseModel):
    """Dashboard shell descriptor for a tenant-scoped page."""

    tenant: TenantContextResponse
    user: UserResponse
    page: str = Field(..., description="Page path below /org/<slug>")


class MembershipResponse(BaseModel):
    """One organization the user belongs to."""

    org_id: str
    org_slug: str
    org_name: str
    role: str = Field(..., description="Upper-cased role, empty when unknown")
    plan: str | None = None
    is_default: bool = False
    is_owner: bool = False
    is_admin: bool = Field(False, description="True for admins and owners")
    is_manager: bool = False
    is_employee: bool = False

    @classmethod
    def from_domain(cls, membership: OrgMembership) -> MembershipResponse:
        """Convert a domain OrgMembership to an API response."""
        return cls(
            org_id=membership.org_id,
            org_slug=membership.org_slug,
            org_name=membership.org_name,
            role=membership.role,
            plan=membership.plan,
            is_default=membership.is_default,
            is_owner=membership.is_owner,
            is_admin=membership.is_admin,
            is_manager=membership.is_manager,
            is_employee=membership.is_employee,
        )


class MembershipListResponse(BaseModel):
    """The user's memberships and the one to preselect."""

    memberships: list[MembershipResponse]
    current_slug: str | None = Field(
        None,
        description="Last organization used, else the default, else the first",
    )


class OrgPickerResponse(BaseModel):
    """Descriptor for the no-tenant (organization picker) page."""

    tenant: None = None
    memberships: list[MembershipResponse] = Field(default_factory=list)
    current_slug: str | None = None
    memberships_unavailable: bool = Field(
        False, description="True when the membership list could not be loaded"
    )
    switch_endpoint: str = Field(
        ..., description="Endpoint to call to select an organization"
    )
