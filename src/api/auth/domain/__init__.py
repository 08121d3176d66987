"""Auth domain layer."""

from auth.domain.value_objects import CurrentUser, GateState, GateStatus

__all__ = [
    "CurrentUser",
    "GateState",
    "GateStatus",
]
