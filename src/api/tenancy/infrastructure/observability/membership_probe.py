"""Domain probe for the organization membership lookup."""

from __future__ import annotations

from typing import Protocol

import structlog


class MembershipLookupProbe(Protocol):
    """Domain probe for membership listing."""

    def memberships_loaded(self, count: int) -> None:
        """Record how many memberships the backend returned."""
        ...

    def membership_skipped(self, reason: str) -> None:
        """Record that a malformed membership entry was dropped."""
        ...

    def membership_lookup_failed(self, error: str) -> None:
        """Record that the membership list could not be fetched."""
        ...


class DefaultMembershipLookupProbe:
    """Default implementation of MembershipLookupProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def memberships_loaded(self, count: int) -> None:
        """Record how many memberships the backend returned."""
        self._logger.debug("memberships_loaded", count=count)

    def membership_skipped(self, reason: str) -> None:
        """Record that a malformed membership entry was dropped."""
        self._logger.info("membership_skipped", reason=reason)

    def membership_lookup_failed(self, error: str) -> None:
        """Record that the membership list could not be fetched."""
        self._logger.warning("membership_lookup_failed", error=error)
