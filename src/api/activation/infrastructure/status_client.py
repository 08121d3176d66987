"""HTTP client for ``GET /orgs/<id>/activation-status``."""

from __future__ import annotations

from urllib.parse import quote

import httpx

from activation.ports.exceptions import ActivationStatusError


class HttpActivationStatusClient:
    """Fetches completed activation keys from the backend."""

    def __init__(self, base_url: str, timeout_seconds: float = 15.0):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds

    async def fetch_completed_keys(self, tenant_id: str) -> frozenset[str]:
        """Return the completed step keys for a tenant.

        Raises:
            ActivationStatusError: On transport errors, non-2xx statuses and
                malformed payloads.
        """
        path = f"/orgs/{quote(tenant_id, safe='')}/activation-status"
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
            ) as client:
                response = await client.get(path)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            raise ActivationStatusError(f"Activation status request failed: {e}") from e
        except ValueError as e:
            raise ActivationStatusError("Activation status is not valid JSON") from e

        if not isinstance(payload, dict):
            raise ActivationStatusError("Activation status has an unexpected shape")

        keys = payload.get("completedKeys") or []
        if not isinstance(keys, list):
            raise ActivationStatusError("completedKeys must be a list")

        return frozenset(str(key) for key in keys)
