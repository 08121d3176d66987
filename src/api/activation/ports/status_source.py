"""Protocol for reading activation status from the backend."""

from __future__ import annotations

from typing import Protocol


class ActivationStatusSource(Protocol):
    """Reads which activation steps the backend considers complete."""

    async def fetch_completed_keys(self, tenant_id: str) -> frozenset[str]:
        """Return the completed step keys for a tenant.

        Raises:
            ActivationStatusError: If the status could not be fetched.
        """
        ...
