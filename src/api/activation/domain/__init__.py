"""Activation domain layer."""

from activation.domain.steps import STEP_CATALOG, StepDefinition
from activation.domain.value_objects import (
    ActivationStatus,
    ActivationStep,
    ActivationStepKey,
)

__all__ = [
    "STEP_CATALOG",
    "ActivationStatus",
    "ActivationStep",
    "ActivationStepKey",
    "StepDefinition",
]
