"""Activation tracker service.

Builds the onboarding checklist for a resolved tenant. The tracker never
changes completion state; it fetches it and maps it onto the step catalog.
"""

from __future__ import annotations

from activation.application.observability import (
    ActivationProbe,
    DefaultActivationProbe,
)
from activation.domain.steps import STEP_CATALOG, StepDefinition
from activation.domain.value_objects import ActivationStatus, ActivationStep
from activation.ports.status_source import ActivationStatusSource
from routing.domain.classifier import tenant_scoped_path
from tenancy.domain.value_objects import TenantRecord


class ActivationTracker:
    """Read-only projection of a tenant's activation progress."""

    def __init__(
        self,
        source: ActivationStatusSource,
        probe: ActivationProbe | None = None,
        catalog: tuple[StepDefinition, ...] = STEP_CATALOG,
    ):
        self._source = source
        self._probe = probe or DefaultActivationProbe()
        self._catalog = catalog

    async def get_status(self, tenant: TenantRecord) -> ActivationStatus | None:
        """Build the checklist for a tenant.

        Action paths are templated with the record's slug, which is the
        tenant's current slug even if the request used an older one.

        Args:
            tenant: Resolved tenant record.

        Returns:
            The checklist, or None when the status could not be fetched
            (the checklist then renders nothing).
        """
        try:
            completed = await self._source.fetch_completed_keys(tenant.id.value)
        except Exception as e:
            self._probe.status_unavailable(tenant_id=tenant.id.value, error=e)
            return None

        known = {definition.key.value for definition in self._catalog}
        unknown = sorted(completed - known)
        if unknown:
            self._probe.unknown_keys_ignored(tenant_id=tenant.id.value, keys=unknown)

        steps = tuple(
            ActivationStep(
                key=definition.key,
                title=definition.title,
                description=definition.description,
                completed=definition.key.value in completed,
                action_path=tenant_scoped_path(tenant.slug.value, definition.path),
            )
            for definition in self._catalog
        )
        status = ActivationStatus(tenant=tenant, steps=steps)

        self._probe.status_loaded(
            tenant_id=tenant.id.value,
            completed_count=status.completed_count,
            total_count=status.total_count,
        )
        return status
