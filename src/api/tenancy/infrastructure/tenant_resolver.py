"""HTTP tenant resolver.

Resolves a tenant slug against the backend's lookup endpoint
(``GET /org/lookup?slug=<slug>``). This is the single implementation of
the slug-to-record contract; every tenant-scoped call site goes through it
(directly or through the caching decorator) instead of issuing its own
lookup.
"""

from __future__ import annotations

from typing import Any

import httpx

from tenancy.domain.value_objects import TenantId, TenantRecord, TenantSlug
from tenancy.infrastructure.observability import (
    DefaultTenantResolverProbe,
    TenantResolverProbe,
)
from tenancy.ports.exceptions import TenantNotFoundError, TenantUnavailableError

LOOKUP_PATH = "/org/lookup"

_NOT_FOUND_STATUSES = frozenset({404, 410})


class HttpTenantResolver:
    """Resolves slugs through the backend lookup endpoint.

    Stateless: nothing is cached and the slug carrier is never touched, so
    two calls with the same slug and unchanged backend state return equal
    records.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 15.0,
        probe: TenantResolverProbe | None = None,
    ):
        """Initialize the resolver.

        Args:
            base_url: Backend base URL (no trailing slash).
            timeout_seconds: Timeout applied to the lookup call.
            probe: Observability probe for resolution events.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._probe = probe or DefaultTenantResolverProbe()

    async def resolve(self, slug: str) -> TenantRecord:
        """Resolve a slug into its tenant record.

        Args:
            slug: Untrusted tenant slug (from the URL or the carrier).

        Returns:
            TenantRecord with the backend id and current slug.

        Raises:
            TenantNotFoundError: If the backend reports no such tenant, or the
                slug cannot name a tenant at all.
            TenantUnavailableError: On timeouts, transport errors, unexpected
                statuses and malformed responses.
        """
        if not TenantSlug.is_safe(slug):
            self._probe.tenant_not_found(slug=slug)
            raise TenantNotFoundError(slug)

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
            ) as client:
                response = await client.get(LOOKUP_PATH, params={"slug": slug})
        except httpx.TimeoutException as e:
            raise self._unavailable(slug, f"timeout: {e}") from e
        except httpx.HTTPError as e:
            raise self._unavailable(slug, f"transport error: {e}") from e

        if response.status_code in _NOT_FOUND_STATUSES:
            self._probe.tenant_not_found(slug=slug)
            raise TenantNotFoundError(slug)

        if not 200 <= response.status_code < 300:
            raise self._unavailable(
                slug, f"unexpected status {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise self._unavailable(slug, "response is not valid JSON") from e

        record = self._parse_record(slug, payload)

        if record.slug.value != slug:
            self._probe.tenant_slug_renamed(slug=slug, record_slug=record.slug.value)
        self._probe.tenant_resolved(
            slug=slug,
            tenant_id=record.id.value,
            record_slug=record.slug.value,
        )
        return record

    def invalidate(self, slug: str | None = None) -> None:
        """No-op: this resolver never caches."""

    def _parse_record(self, slug: str, payload: Any) -> TenantRecord:
        """Extract the record from either ``{id, slug}`` or ``{data: {...}}``."""
        if isinstance(payload, dict) and "data" in payload:
            payload = payload["data"]

        if payload is None:
            self._probe.tenant_not_found(slug=slug)
            raise TenantNotFoundError(slug)

        if not isinstance(payload, dict):
            raise self._unavailable(slug, "unexpected response shape")

        raw_id = payload.get("id")
        if raw_id is None or str(raw_id) == "":
            raise self._unavailable(slug, "response missing tenant id")

        raw_slug = payload.get("slug") or slug
        if not TenantSlug.is_safe(str(raw_slug)):
            raise self._unavailable(slug, f"response carries invalid slug {raw_slug!r}")

        return TenantRecord(
            id=TenantId(value=str(raw_id)),
            slug=TenantSlug(value=str(raw_slug)),
        )

    def _unavailable(self, slug: str, reason: str) -> TenantUnavailableError:
        self._probe.tenant_lookup_unavailable(slug=slug, reason=reason)
        return TenantUnavailableError(slug, reason)
