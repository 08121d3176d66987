"""HTTP membership lookup against the backend's ``GET /me/orgs``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from tenancy.domain.memberships import OrgMembership
from tenancy.domain.value_objects import TenantSlug
from tenancy.infrastructure.observability import (
    DefaultMembershipLookupProbe,
    MembershipLookupProbe,
)
from tenancy.ports.exceptions import MembershipLookupError

MEMBERSHIPS_PATH = "/me/orgs"


class HttpMembershipLookup:
    """Forwards the caller's credentials and reads their memberships."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 15.0,
        probe: MembershipLookupProbe | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._probe = probe or DefaultMembershipLookupProbe()

    async def fetch(
        self,
        cookies: Mapping[str, str] | None = None,
        authorization: str | None = None,
    ) -> list[OrgMembership]:
        """Return the caller's memberships.

        Accepts a bare list or a list wrapped in ``items`` or ``data``.
        Entries without an id or with a slug unsafe to carry are dropped.

        Raises:
            MembershipLookupError: On transport errors, non-2xx statuses
                (signed-out callers included) and malformed responses.
        """
        headers = {"Accept": "application/json"}
        if authorization:
            headers["Authorization"] = authorization

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                cookies=dict(cookies or {}),
            ) as client:
                response = await client.get(MEMBERSHIPS_PATH, headers=headers)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            self._probe.membership_lookup_failed(error=str(e))
            raise MembershipLookupError(f"Membership lookup failed: {e}") from e
        except ValueError as e:
            self._probe.membership_lookup_failed(error="invalid JSON")
            raise MembershipLookupError("Membership response is not JSON") from e

        memberships = []
        for entry in _entries(payload):
            membership = self._parse(entry)
            if membership is not None:
                memberships.append(membership)

        self._probe.memberships_loaded(count=len(memberships))
        return memberships

    def _parse(self, entry: Any) -> OrgMembership | None:
        if not isinstance(entry, dict):
            self._probe.membership_skipped(reason="not an object")
            return None

        org_id = entry.get("orgId") or entry.get("org_id")
        org_slug = entry.get("orgSlug") or entry.get("org_slug")
        if not org_id or not org_slug:
            self._probe.membership_skipped(reason="missing id or slug")
            return None
        if not TenantSlug.is_safe(str(org_slug)):
            self._probe.membership_skipped(reason="unsafe slug")
            return None

        plan = entry.get("plan")
        return OrgMembership(
            org_id=str(org_id),
            org_slug=str(org_slug),
            org_name=str(entry.get("orgName") or entry.get("org_name") or org_slug),
            role=str(entry.get("role") or "").upper(),
            plan=str(plan) if plan is not None else None,
            is_default=bool(entry.get("isDefault") or entry.get("is_default")),
        )


def _entries(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for envelope in ("items", "data"):
            if isinstance(payload.get(envelope), list):
                return payload[envelope]
    return []
