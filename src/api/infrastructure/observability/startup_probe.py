"""Domain probe for application startup and lifecycle events.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events during application initialization and shutdown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class StartupProbe(Protocol):
    """Domain probe for application startup operations."""

    def application_started(self, version: str, backend_url: str) -> None:
        """Record that the application finished starting."""
        ...

    def tenant_cache_enabled(self, ttl_seconds: float) -> None:
        """Record that tenant records are cached in-process."""
        ...

    def edge_auth_unknown(self) -> None:
        """Record that no session cookie is configured for the routing edge."""
        ...

    def application_stopped(self) -> None:
        """Record that the application shut down."""
        ...

    def with_context(self, context: ObservationContext) -> StartupProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultStartupProbe:
        """Create a new probe with observation context bound."""
        return DefaultStartupProbe(logger=self._logger, context=context)

    def application_started(self, version: str, backend_url: str) -> None:
        """Record that the application finished starting."""
        self._logger.info(
            "application_started",
            version=version,
            backend_url=backend_url,
            **self._get_context_kwargs(),
        )

    def tenant_cache_enabled(self, ttl_seconds: float) -> None:
        """Record that tenant records are cached in-process."""
        self._logger.info(
            "tenant_cache_enabled",
            ttl_seconds=ttl_seconds,
            **self._get_context_kwargs(),
        )

    def edge_auth_unknown(self) -> None:
        """Record that no session cookie is configured for the routing edge."""
        self._logger.warning(
            "edge_auth_unknown",
            **self._get_context_kwargs(),
        )

    def application_stopped(self) -> None:
        """Record that the application shut down."""
        self._logger.info(
            "application_stopped",
            **self._get_context_kwargs(),
        )
