"""Domain-oriented observability for the auth gate and current-user lookup.

Follows the Domain Oriented Observability pattern from Martin Fowler.
"""

from typing import Protocol

import structlog


class CurrentUserLookupProbe(Protocol):
    """Observability probe for the backend current-user lookup."""

    def user_found(self, user_id: str) -> None:
        """Called when the backend confirmed an identity."""
        ...

    def user_not_signed_in(self, status_code: int) -> None:
        """Called when the backend reports no signed-in user."""
        ...

    def lookup_failed(self, error: str) -> None:
        """Called when the lookup could not be completed."""
        ...


class DefaultCurrentUserLookupProbe:
    """Default implementation of CurrentUserLookupProbe using structlog."""

    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def user_found(self, user_id: str) -> None:
        """Log when the backend confirmed an identity."""
        self._logger.debug(
            "current_user_found",
            user_id=user_id,
        )

    def user_not_signed_in(self, status_code: int) -> None:
        """Log when the backend reports no signed-in user."""
        self._logger.info(
            "current_user_not_signed_in",
            status_code=status_code,
        )

    def lookup_failed(self, error: str) -> None:
        """Log when the lookup could not be completed."""
        self._logger.warning(
            "current_user_lookup_failed",
            error=error,
        )


class AuthGateProbe(Protocol):
    """Observability probe for auth gate transitions."""

    def gate_authenticated(self, path: str, user_id: str) -> None:
        """Called when the gate confirmed an identity."""
        ...

    def gate_unauthenticated(self, path: str, location: str) -> None:
        """Called when the gate sends the caller to the auth page."""
        ...

    def gate_lookup_failed(self, path: str, error: str) -> None:
        """Called when the lookup raised; the gate treats it as unauthenticated."""
        ...

    def gate_result_discarded(self, path: str) -> None:
        """Called when a lookup settled after the gate was torn down."""
        ...


class DefaultAuthGateProbe:
    """Default implementation of AuthGateProbe using structlog."""

    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def gate_authenticated(self, path: str, user_id: str) -> None:
        """Log when the gate confirmed an identity."""
        self._logger.debug(
            "auth_gate_authenticated",
            path=path,
            user_id=user_id,
        )

    def gate_unauthenticated(self, path: str, location: str) -> None:
        """Log when the gate sends the caller to the auth page."""
        self._logger.info(
            "auth_gate_unauthenticated",
            path=path,
            location=location,
        )

    def gate_lookup_failed(self, path: str, error: str) -> None:
        """Log when the lookup raised."""
        self._logger.warning(
            "auth_gate_lookup_failed",
            path=path,
            error=error,
        )

    def gate_result_discarded(self, path: str) -> None:
        """Log when a lookup settled after teardown."""
        self._logger.debug(
            "auth_gate_result_discarded",
            path=path,
        )
