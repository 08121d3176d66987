"""HTTP routes for the activation checklist."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from activation.application.tracker import ActivationTracker
from activation.dependencies import get_activation_tracker
from activation.presentation.models import ActivationStatusResponse
from auth.dependencies import require_api_user
from auth.domain.value_objects import CurrentUser
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.dependencies import get_api_tenant_context
from tenancy.domain.value_objects import TenantId, TenantRecord, TenantSlug

router = APIRouter(prefix="/api", tags=["activation"])


@router.get(
    "/org/{org_slug}/activation",
    response_model=ActivationStatusResponse,
    responses={204: {"description": "Checklist hidden"}},
)
async def get_activation(
    current_user: Annotated[CurrentUser, Depends(require_api_user)],
    tenant: Annotated[TenantContext, Depends(get_api_tenant_context)],
    tracker: Annotated[ActivationTracker, Depends(get_activation_tracker)],
) -> ActivationStatusResponse | Response:
    """Return the onboarding checklist for the tenant.

    Responds 204 when there is nothing to show: every step is complete,
    the status could not be fetched, or the tenant could not be verified.
    """
    if tenant.is_degraded or tenant.tenant_id is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    record = TenantRecord(
        id=TenantId(value=tenant.tenant_id),
        slug=TenantSlug(value=tenant.slug),
    )
    activation = await tracker.get_status(record)
    if activation is None or not activation.visible:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return ActivationStatusResponse.from_domain(activation)
