"""Pydantic models for the activation checklist."""

from __future__ import annotations

from pydantic import BaseModel, Field

from activation.domain.value_objects import ActivationStatus, ActivationStep


class ActivationStepResponse(BaseModel):
    """One checklist entry."""

    key: str
    title: str
    description: str
    completed: bool
    action_path: str = Field(..., description="Tenant-scoped page for this step")

    @classmethod
    def from_domain(cls, step: ActivationStep) -> ActivationStepResponse:
        """Convert a domain ActivationStep to an API response."""
        return cls(
            key=step.key.value,
            title=step.title,
            description=step.description,
            completed=step.completed,
            action_path=step.action_path,
        )


class ActivationStatusResponse(BaseModel):
    """Onboarding checklist for one tenant."""

    tenant_slug: str
    steps: list[ActivationStepResponse]
    completed_count: int
    total_count: int
    percent: int = Field(..., ge=0, le=100)
    next_step: ActivationStepResponse | None = Field(
        None, description="First incomplete step"
    )

    @classmethod
    def from_domain(cls, status: ActivationStatus) -> ActivationStatusResponse:
        """Convert a domain ActivationStatus to an API response."""
        next_step = status.next_step
        return cls(
            tenant_slug=status.tenant.slug.value,
            steps=[ActivationStepResponse.from_domain(step) for step in status.steps],
            completed_count=status.completed_count,
            total_count=status.total_count,
            percent=status.percent,
            next_step=(
                ActivationStepResponse.from_domain(next_step)
                if next_step is not None
                else None
            ),
        )
