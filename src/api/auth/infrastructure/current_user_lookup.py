"""HTTP current-user lookup against the backend's ``GET /auth/me``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from auth.domain.value_objects import CurrentUser
from auth.observability import CurrentUserLookupProbe, DefaultCurrentUserLookupProbe
from auth.ports.exceptions import CurrentUserLookupError

CURRENT_USER_PATH = "/auth/me"

_NOT_SIGNED_IN_STATUSES = frozenset({401, 403})


class HttpCurrentUserLookup:
    """Forwards the caller's credentials to the backend and reads the user."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 15.0,
        probe: CurrentUserLookupProbe | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._probe = probe or DefaultCurrentUserLookupProbe()

    async def fetch(
        self,
        cookies: Mapping[str, str] | None = None,
        authorization: str | None = None,
    ) -> CurrentUser | None:
        """Return the caller's identity, or None when not signed in.

        Args:
            cookies: Caller cookies to forward (the backend session lives there).
            authorization: Caller Authorization header to forward, if any.

        Raises:
            CurrentUserLookupError: On transport errors, unexpected statuses
                and malformed responses.
        """
        headers = {"Accept": "application/json"}
        if authorization:
            headers["Authorization"] = authorization

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                cookies=dict(cookies or {}),
            ) as client:
                response = await client.get(CURRENT_USER_PATH, headers=headers)
        except httpx.HTTPError as e:
            self._probe.lookup_failed(error=str(e))
            raise CurrentUserLookupError(f"Current-user lookup failed: {e}") from e

        if response.status_code in _NOT_SIGNED_IN_STATUSES:
            self._probe.user_not_signed_in(status_code=response.status_code)
            return None

        if not 200 <= response.status_code < 300:
            self._probe.lookup_failed(error=f"status {response.status_code}")
            raise CurrentUserLookupError(
                f"Current-user lookup returned status {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            self._probe.lookup_failed(error="invalid JSON")
            raise CurrentUserLookupError("Current-user response is not JSON") from e

        user = _parse_user(payload)
        if user is None:
            self._probe.user_not_signed_in(status_code=response.status_code)
            return None

        self._probe.user_found(user_id=user.id)
        return user


def _parse_user(payload: Any) -> CurrentUser | None:
    """Read ``{id, ...}``, ``{user: {...}}`` or ``{data: {...}}``."""
    if isinstance(payload, dict):
        for envelope in ("user", "data"):
            if envelope in payload:
                payload = payload[envelope]
                break

    if not isinstance(payload, dict) or not payload.get("id"):
        return None

    def _optional(key: str) -> str | None:
        value = payload.get(key)
        return str(value) if value is not None else None

    return CurrentUser(
        id=str(payload["id"]),
        email=_optional("email"),
        name=_optional("name"),
        role=_optional("role"),
    )
