"""Domain-oriented observability for request routing.

Follows the Domain Oriented Observability pattern from Martin Fowler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RoutingProbe(Protocol):
    """Domain probe for routing decisions."""

    def request_allowed(self, path: str, category: str) -> None:
        """Record that a request passed through unchanged."""
        ...

    def request_rewritten(self, path: str, target: str, slug: str) -> None:
        """Record that a legacy path was rewritten to its tenant-scoped form."""
        ...

    def redirected_to_auth(self, path: str, location: str) -> None:
        """Record that an anonymous caller was sent to the auth page."""
        ...

    def redirected_to_no_tenant(self, path: str, location: str) -> None:
        """Record that a caller without a tenant was sent to the org picker."""
        ...

    def routing_failed(self, path: str, error: Exception) -> None:
        """Record that computing the decision failed and the request was allowed."""
        ...

    def with_context(self, context: ObservationContext) -> RoutingProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRoutingProbe:
    """Default implementation of RoutingProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultRoutingProbe:
        """Create a new probe with observation context bound."""
        return DefaultRoutingProbe(logger=self._logger, context=context)

    def request_allowed(self, path: str, category: str) -> None:
        """Record that a request passed through unchanged."""
        self._logger.debug(
            "routing_request_allowed",
            path=path,
            category=category,
            **self._get_context_kwargs(),
        )

    def request_rewritten(self, path: str, target: str, slug: str) -> None:
        """Record that a legacy path was rewritten to its tenant-scoped form."""
        self._logger.info(
            "routing_request_rewritten",
            path=path,
            target=target,
            slug=slug,
            **self._get_context_kwargs(),
        )

    def redirected_to_auth(self, path: str, location: str) -> None:
        """Record that an anonymous caller was sent to the auth page."""
        self._logger.info(
            "routing_redirected_to_auth",
            path=path,
            location=location,
            **self._get_context_kwargs(),
        )

    def redirected_to_no_tenant(self, path: str, location: str) -> None:
        """Record that a caller without a tenant was sent to the org picker."""
        self._logger.info(
            "routing_redirected_to_no_tenant",
            path=path,
            location=location,
            **self._get_context_kwargs(),
        )

    def routing_failed(self, path: str, error: Exception) -> None:
        """Record that computing the decision failed and the request was allowed."""
        self._logger.error(
            "routing_failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
