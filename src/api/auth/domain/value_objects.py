"""Value objects for the auth domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class CurrentUser:
    """Identity returned by the backend's current-user endpoint."""

    id: str
    email: str | None = None
    name: str | None = None
    role: str | None = None


class GateStatus(StrEnum):
    """States of the auth gate guarding one mounted view."""

    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class GateState:
    """Current state of an auth gate.

    ``user`` is set only in the ``AUTHENTICATED`` state.
    """

    status: GateStatus
    user: CurrentUser | None = None

    @classmethod
    def loading(cls) -> GateState:
        """Initial state, before the lookup settles."""
        return cls(status=GateStatus.LOADING)

    @classmethod
    def unauthenticated(cls) -> GateState:
        """Terminal state when no identity could be confirmed."""
        return cls(status=GateStatus.UNAUTHENTICATED)

    @classmethod
    def authenticated(cls, user: CurrentUser) -> GateState:
        """Terminal state carrying the confirmed identity."""
        return cls(status=GateStatus.AUTHENTICATED, user=user)

    @property
    def is_settled(self) -> bool:
        """Whether the gate has left the loading state."""
        return self.status is not GateStatus.LOADING
