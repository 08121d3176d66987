"""Domain probe for tenant context resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to resolving the ``/org/<slug>`` path
segment into a tenant context.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantContextProbe(Protocol):
    """Domain probe for tenant context resolution operations."""

    def tenant_context_resolved(self, slug: str, record_slug: str) -> None:
        """Record that the path slug resolved to a tenant.

        The tenant id comes from the bound observation context.
        """
        ...

    def tenant_context_not_found(self, slug: str) -> None:
        """Record that the path slug names no tenant."""
        ...

    def tenant_context_degraded(self, slug: str, reason: str) -> None:
        """Record that the request continues without a verified tenant."""
        ...

    def with_context(self, context: ObservationContext) -> TenantContextProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantContextProbe:
    """Default implementation of TenantContextProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultTenantContextProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantContextProbe(logger=self._logger, context=context)

    def tenant_context_resolved(self, slug: str, record_slug: str) -> None:
        """Record that the path slug resolved to a tenant."""
        self._logger.debug(
            "tenant_context_resolved",
            slug=slug,
            record_slug=record_slug,
            **self._get_context_kwargs(),
        )

    def tenant_context_not_found(self, slug: str) -> None:
        """Record that the path slug names no tenant."""
        self._logger.info(
            "tenant_context_not_found",
            slug=slug,
            **self._get_context_kwargs(),
        )

    def tenant_context_degraded(self, slug: str, reason: str) -> None:
        """Record that the request continues without a verified tenant."""
        self._logger.warning(
            "tenant_context_degraded",
            slug=slug,
            reason=reason,
            message="Tenant lookup unavailable, rendering best-effort",
            **self._get_context_kwargs(),
        )
