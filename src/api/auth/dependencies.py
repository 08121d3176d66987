"""FastAPI dependencies for the auth bounded context.

Usage in FastAPI routes:
    @router.get("/org/{org_slug}")
    async def shell(
        user: Annotated[CurrentUser, Depends(get_current_user)],
    ):
        ...
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from auth.application.gate import AuthGate
from auth.domain.value_objects import CurrentUser
from auth.infrastructure.current_user_lookup import HttpCurrentUserLookup
from auth.observability import AuthGateProbe, DefaultAuthGateProbe
from auth.ports.lookup import CurrentUserLookup
from infrastructure.settings import (
    BackendSettings,
    RoutingSettings,
    get_backend_settings,
    get_routing_settings,
)
from routing.presentation.middleware import original_request_path


def get_current_user_lookup(
    settings: Annotated[BackendSettings, Depends(get_backend_settings)],
) -> CurrentUserLookup:
    """Dependency for the backend current-user lookup."""
    return HttpCurrentUserLookup(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
    )


def get_auth_gate_probe() -> AuthGateProbe:
    """Dependency for the auth gate probe."""
    return DefaultAuthGateProbe()


async def _run_gate(
    request: Request,
    lookup: CurrentUserLookup,
    settings: RoutingSettings,
    probe: AuthGateProbe,
) -> tuple[CurrentUser | None, str]:
    """Run one auth gate for the request.

    Returns:
        The confirmed user (or None) and the auth page URL for this request.
    """
    navigations: list[str] = []
    gate = AuthGate(
        lookup=lambda: lookup.fetch(
            cookies=request.cookies,
            authorization=request.headers.get("authorization"),
        ),
        navigate=navigations.append,
        current_path=original_request_path(request),
        login_path=settings.login_path,
        return_param=settings.return_param,
        probe=probe,
    )
    gate.mount()
    try:
        state = await gate.wait()
    finally:
        gate.unmount()

    location = navigations[0] if navigations else gate.login_location
    return state.user, location


async def get_current_user(
    request: Request,
    lookup: Annotated[CurrentUserLookup, Depends(get_current_user_lookup)],
    settings: Annotated[RoutingSettings, Depends(get_routing_settings)],
    probe: Annotated[AuthGateProbe, Depends(get_auth_gate_probe)],
) -> CurrentUser:
    """Confirm the caller's identity for a tenant-scoped view.

    Raises:
        HTTPException: Redirect (307 by default) to the auth page with the
            current path as return path when no identity is confirmed.
    """
    user, location = await _run_gate(request, lookup, settings, probe)
    if user is None:
        raise HTTPException(
            status_code=settings.redirect_status_code,
            detail="Authentication required",
            headers={"Location": location},
        )
    return user


async def require_api_user(
    request: Request,
    lookup: Annotated[CurrentUserLookup, Depends(get_current_user_lookup)],
    settings: Annotated[RoutingSettings, Depends(get_routing_settings)],
    probe: Annotated[AuthGateProbe, Depends(get_auth_gate_probe)],
) -> CurrentUser:
    """Confirm the caller's identity for a JSON endpoint.

    Raises:
        HTTPException 401: When no identity is confirmed.
    """
    user, _ = await _run_gate(request, lookup, settings, probe)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user
