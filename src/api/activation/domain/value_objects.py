"""Value objects for the activation domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tenancy.domain.value_objects import TenantRecord


class ActivationStepKey(StrEnum):
    """Fixed set of onboarding steps tracked per tenant."""

    CREATE_JOB = "create_job"
    ADD_CANDIDATE = "add_candidate"
    GENERATE_AI_SUMMARY = "generate_ai_summary"
    ADD_EMPLOYEE = "add_employee"
    INVITE_MEMBER = "invite_member"


@dataclass(frozen=True)
class ActivationStep:
    """One checklist entry for a tenant."""

    key: ActivationStepKey
    title: str
    description: str
    completed: bool
    action_path: str


@dataclass(frozen=True)
class ActivationStatus:
    """Checklist for one tenant, in catalog order."""

    tenant: TenantRecord
    steps: tuple[ActivationStep, ...]

    @property
    def total_count(self) -> int:
        return len(self.steps)

    @property
    def completed_count(self) -> int:
        return sum(1 for step in self.steps if step.completed)

    @property
    def percent(self) -> int:
        """Completion percentage, rounded to the nearest integer."""
        if not self.steps:
            return 100
        return round(self.completed_count / self.total_count * 100)

    @property
    def next_step(self) -> ActivationStep | None:
        """First incomplete step, the "next best action"."""
        return next((step for step in self.steps if not step.completed), None)

    @property
    def visible(self) -> bool:
        """The checklist hides itself once every step is complete."""
        return self.next_step is not None
