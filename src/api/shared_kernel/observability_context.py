"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped and tenant-relevant metadata that should be
    included with all instrumentation events.

    Attributes:
        request_id: Unique identifier for the current request/operation.
        user_id: Identifier of the signed-in user (if known).
        tenant_id: Resolved tenant identifier (if resolved).
        tenant_slug: Tenant slug as supplied by the request (if any).
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(request_id="req-123", tenant_slug="acme")
        probe = DefaultRoutingProbe().with_context(context)
    """

    request_id: str | None = None
    user_id: str | None = None
    tenant_id: str | None = None
    tenant_slug: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.user_id is not None:
            result["user_id"] = self.user_id
        if self.tenant_id is not None:
            result["tenant_id"] = self.tenant_id
        if self.tenant_slug is not None:
            result["tenant_slug"] = self.tenant_slug
        result.update(self.extra)
        return result

    def with_tenant(self, tenant_id: str, tenant_slug: str) -> ObservationContext:
        """Create a new context with the resolved tenant set."""
        return ObservationContext(
            request_id=self.request_id,
            user_id=self.user_id,
            tenant_id=tenant_id,
            tenant_slug=tenant_slug,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        new_extra = {**self.extra, **kwargs}
        return ObservationContext(
            request_id=self.request_id,
            user_id=self.user_id,
            tenant_id=self.tenant_id,
            tenant_slug=self.tenant_slug,
            extra=new_extra,
        )
