"""Domain probe for tenant resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the slug-to-record lookup against the backend.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantResolverProbe(Protocol):
    """Domain probe for tenant resolution operations."""

    def tenant_resolved(self, slug: str, tenant_id: str, record_slug: str) -> None:
        """Record that a slug resolved to a tenant record."""
        ...

    def tenant_slug_renamed(self, slug: str, record_slug: str) -> None:
        """Record that the backend returned a different (current) slug."""
        ...

    def tenant_not_found(self, slug: str) -> None:
        """Record that no tenant exists for the slug."""
        ...

    def tenant_lookup_unavailable(self, slug: str, reason: str) -> None:
        """Record that the lookup could not be completed."""
        ...

    def tenant_cache_hit(self, slug: str, tenant_id: str) -> None:
        """Record that a cached record was served."""
        ...

    def tenant_cache_invalidated(self, slug: str | None) -> None:
        """Record that cached records were dropped."""
        ...

    def with_context(self, context: ObservationContext) -> TenantResolverProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantResolverProbe:
    """Default implementation of TenantResolverProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantResolverProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantResolverProbe(logger=self._logger, context=context)

    def tenant_resolved(self, slug: str, tenant_id: str, record_slug: str) -> None:
        """Record that a slug resolved to a tenant record."""
        self._logger.debug(
            "tenant_resolved",
            slug=slug,
            tenant_id=tenant_id,
            record_slug=record_slug,
            **self._get_context_kwargs(),
        )

    def tenant_slug_renamed(self, slug: str, record_slug: str) -> None:
        """Record that the backend returned a different (current) slug."""
        self._logger.info(
            "tenant_slug_renamed",
            slug=slug,
            record_slug=record_slug,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, slug: str) -> None:
        """Record that no tenant exists for the slug."""
        self._logger.info(
            "tenant_not_found",
            slug=slug,
            **self._get_context_kwargs(),
        )

    def tenant_lookup_unavailable(self, slug: str, reason: str) -> None:
        """Record that the lookup could not be completed."""
        self._logger.warning(
            "tenant_lookup_unavailable",
            slug=slug,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def tenant_cache_hit(self, slug: str, tenant_id: str) -> None:
        """Record that a cached record was served."""
        self._logger.debug(
            "tenant_cache_hit",
            slug=slug,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def tenant_cache_invalidated(self, slug: str | None) -> None:
        """Record that cached records were dropped."""
        self._logger.debug(
            "tenant_cache_invalidated",
            slug=slug,
            **self._get_context_kwargs(),
        )
