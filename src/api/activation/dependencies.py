"""FastAPI dependencies for the activation bounded context."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from activation.application.tracker import ActivationTracker
from activation.infrastructure.status_client import HttpActivationStatusClient
from infrastructure.settings import BackendSettings, get_backend_settings


def get_activation_tracker(
    settings: Annotated[BackendSettings, Depends(get_backend_settings)],
) -> ActivationTracker:
    """Dependency for the activation tracker."""
    return ActivationTracker(
        source=HttpActivationStatusClient(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
        ),
    )
