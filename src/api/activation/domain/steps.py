"""Display metadata for the activation steps."""

from __future__ import annotations

from dataclasses import dataclass

from activation.domain.value_objects import ActivationStepKey


@dataclass(frozen=True)
class StepDefinition:
    """Title, description and destination of a step.

    ``path`` is relative to the tenant scope (``/org/<slug>``).
    """

    key: ActivationStepKey
    title: str
    description: str
    path: str


STEP_CATALOG: tuple[StepDefinition, ...] = (
    StepDefinition(
        key=ActivationStepKey.CREATE_JOB,
        title="Create your first job",
        description="Open a role so candidates can start applying.",
        path="/jobs/new",
    ),
    StepDefinition(
        key=ActivationStepKey.ADD_CANDIDATE,
        title="Add a candidate",
        description="Add someone to your hiring pipeline.",
        path="/candidates/new",
    ),
    StepDefinition(
        key=ActivationStepKey.GENERATE_AI_SUMMARY,
        title="Generate an AI summary",
        description="Let AI summarize a candidate for your team.",
        path="/hiring/ai-studio/candidate-summary",
    ),
    StepDefinition(
        key=ActivationStepKey.ADD_EMPLOYEE,
        title="Add an employee",
        description="Start your people directory.",
        path="/people/new",
    ),
    StepDefinition(
        key=ActivationStepKey.INVITE_MEMBER,
        title="Invite a teammate",
        description="Bring an admin or manager into the workspace.",
        path="/settings/members",
    ),
)
