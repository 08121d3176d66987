"""HTTP routes for the tenancy bounded context.

``router`` holds the JSON endpoints that write the slug carrier (org
switch, sign-out) and list the user's memberships. ``shell_router`` serves
the tenant-scoped page shells that legacy paths are rewritten into, plus
the organization picker.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse

from auth.dependencies import get_current_user, require_api_user
from auth.domain.value_objects import CurrentUser
from infrastructure.settings import RoutingSettings, get_routing_settings
from routing.domain.classifier import tenant_scoped_path
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.dependencies import (
    get_api_tenant_context,
    get_membership_lookup,
    get_slug_store,
    get_tenant_context,
    get_tenant_resolver,
)
from tenancy.domain.memberships import (
    OrgMembership,
    find_membership,
    select_current,
)
from tenancy.infrastructure.slug_store import TenantSlugStore
from tenancy.ports.exceptions import (
    MembershipLookupError,
    TenantNotFoundError,
    TenantUnavailableError,
)
from tenancy.ports.memberships import MembershipLookup
from tenancy.ports.resolvers import TenantResolver
from tenancy.presentation.models import (
    MembershipListResponse,
    MembershipResponse,
    OrgPickerResponse,
    ShellResponse,
    SwitchOrgRequest,
    SwitchOrgResponse,
    TenantContextResponse,
    TenantResponse,
    UserResponse,
)

router = APIRouter(prefix="/api", tags=["tenancy"])

shell_router = APIRouter(tags=["shell"])

LANDING_PAGE = "/getting-started"
SWITCH_ENDPOINT = "/api/org/switch"


async def _fetch_memberships(
    request: Request, lookup: MembershipLookup
) -> list[OrgMembership]:
    return await lookup.fetch(
        cookies=request.cookies,
        authorization=request.headers.get("authorization"),
    )


@router.post("/org/switch")
async def switch_org(
    body: SwitchOrgRequest,
    request: Request,
    response: Response,
    current_user: Annotated[CurrentUser, Depends(require_api_user)],
    resolver: Annotated[TenantResolver, Depends(get_tenant_resolver)],
    memberships: Annotated[MembershipLookup, Depends(get_membership_lookup)],
    slug_store: Annotated[TenantSlugStore, Depends(get_slug_store)],
) -> SwitchOrgResponse:
    """Switch the active organization.

    Resolves the requested slug first, then checks that the caller belongs
    to that organization. Only then is the tenant written to the carrier,
    with the backend's current slug.

    Raises:
        HTTPException: 404 if the organization does not exist
        HTTPException: 403 if the caller is not a member
        HTTPException: 503 if the backend is unavailable (carrier untouched)
    """
    try:
        record = await resolver.resolve(body.slug)
    except TenantNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Organization '{body.slug}' not found",
        )
    except TenantUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Organization lookup is temporarily unavailable",
        )

    try:
        owned = await _fetch_memberships(request, memberships)
    except MembershipLookupError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Organization memberships are temporarily unavailable",
        )
    if (
        find_membership(owned, record.id.value) is None
        and find_membership(owned, record.slug.value) is None
    ):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not a member of organization '{body.slug}'",
        )

    previous = slug_store.read_slug(request)
    if previous is not None:
        resolver.invalidate(previous)
    resolver.invalidate(body.slug)

    slug_store.write_slug(response, record.slug.value)

    return SwitchOrgResponse(
        tenant=TenantResponse.from_domain(record),
        redirect_to=tenant_scoped_path(record.slug.value, LANDING_PAGE),
    )


@router.post("/auth/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    resolver: Annotated[TenantResolver, Depends(get_tenant_resolver)],
    slug_store: Annotated[TenantSlugStore, Depends(get_slug_store)],
) -> Response:
    """Forget the active organization.

    Clears the slug carrier and every cached tenant record. Ending the
    backend session itself is the backend's job.
    """
    resolver.invalidate()
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    slug_store.clear_slug(response)
    return response


@router.get("/me/orgs")
async def list_memberships(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(require_api_user)],
    lookup: Annotated[MembershipLookup, Depends(get_membership_lookup)],
    slug_store: Annotated[TenantSlugStore, Depends(get_slug_store)],
) -> MembershipListResponse:
    """List the caller's organizations with their role flags.

    Raises:
        HTTPException: 503 if the membership list could not be loaded
    """
    try:
        owned = await _fetch_memberships(request, lookup)
    except MembershipLookupError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Organization memberships are temporarily unavailable",
        )

    current = select_current(owned, slug_store.read_slug(request))
    return MembershipListResponse(
        memberships=[MembershipResponse.from_domain(m) for m in owned],
        current_slug=current.org_slug if current else None,
    )


@router.get("/org/{org_slug}/context")
async def get_org_context(
    current_user: Annotated[CurrentUser, Depends(require_api_user)],
    tenant: Annotated[TenantContext, Depends(get_api_tenant_context)],
) -> TenantContextResponse:
    """Return the resolved tenant context for the dashboard shell."""
    return TenantContextResponse.from_context(tenant)


@shell_router.get("/org", response_model=OrgPickerResponse)
async def org_picker(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    lookup: Annotated[MembershipLookup, Depends(get_membership_lookup)],
    slug_store: Annotated[TenantSlugStore, Depends(get_slug_store)],
    settings: Annotated[RoutingSettings, Depends(get_routing_settings)],
):
    """No-tenant page: the caller must pick an organization.

    A caller with exactly one membership is sent straight to its landing
    page and the carrier is set; otherwise the memberships are listed. A
    failed lookup still renders the picker, flagged as unavailable.
    """
    try:
        owned = await _fetch_memberships(request, lookup)
    except MembershipLookupError:
        return OrgPickerResponse(
            memberships_unavailable=True,
            switch_endpoint=SWITCH_ENDPOINT,
        )

    if len(owned) == 1:
        only = owned[0]
        redirect = RedirectResponse(
            url=tenant_scoped_path(only.org_slug, LANDING_PAGE),
            status_code=settings.redirect_status_code,
        )
        slug_store.write_slug(redirect, only.org_slug)
        return redirect

    current = select_current(owned, slug_store.read_slug(request))
    return OrgPickerResponse(
        memberships=[MembershipResponse.from_domain(m) for m in owned],
        current_slug=current.org_slug if current else None,
        switch_endpoint=SWITCH_ENDPOINT,
    )


@shell_router.get("/org/{org_slug}")
@shell_router.get("/org/{org_slug}/{page:path}")
async def tenant_shell(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    tenant: Annotated[TenantContext, Depends(get_tenant_context)],
    page: str = "",
) -> ShellResponse:
    """Describe the shell of a tenant-scoped page.

    Both dependencies re-check what the routing middleware only assumed:
    that the caller is signed in and that the slug names a real tenant.
    """
    return ShellResponse(
        tenant=TenantContextResponse.from_context(tenant),
        user=UserResponse.from_domain(current_user),
        page=f"/{page}",
    )
