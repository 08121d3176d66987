"""Domain probe for the activation tracker.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of building a tenant's onboarding checklist.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ActivationProbe(Protocol):
    """Domain probe for activation status operations."""

    def status_loaded(
        self,
        tenant_id: str,
        completed_count: int,
        total_count: int,
    ) -> None:
        """Record that a tenant's checklist was built."""
        ...

    def unknown_keys_ignored(self, tenant_id: str, keys: list[str]) -> None:
        """Record that the backend reported keys outside the step catalog."""
        ...

    def status_unavailable(self, tenant_id: str, error: Exception) -> None:
        """Record that the status could not be fetched (checklist hidden)."""
        ...

    def with_context(self, context: ObservationContext) -> ActivationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultActivationProbe:
    """Default implementation of ActivationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultActivationProbe:
        """Create a new probe with observation context bound."""
        return DefaultActivationProbe(logger=self._logger, context=context)

    def status_loaded(
        self,
        tenant_id: str,
        completed_count: int,
        total_count: int,
    ) -> None:
        """Record that a tenant's checklist was built."""
        self._logger.debug(
            "activation_status_loaded",
            tenant_id=tenant_id,
            completed_count=completed_count,
            total_count=total_count,
            **self._get_context_kwargs(),
        )

    def unknown_keys_ignored(self, tenant_id: str, keys: list[str]) -> None:
        """Record that the backend reported keys outside the step catalog."""
        self._logger.debug(
            "activation_unknown_keys_ignored",
            tenant_id=tenant_id,
            keys=keys,
            **self._get_context_kwargs(),
        )

    def status_unavailable(self, tenant_id: str, error: Exception) -> None:
        """Record that the status could not be fetched (checklist hidden)."""
        self._logger.warning(
            "activation_status_unavailable",
            tenant_id=tenant_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
