"""Cookie-backed tenant slug carrier.

The store is the only component that reads or writes the tenant slug
cookie. Reads come from the incoming request; writes and clears only set
directives on the outgoing response, so the current request keeps seeing
the slug it arrived with.
"""

from __future__ import annotations

from urllib.parse import quote, unquote

from starlette.requests import HTTPConnection
from starlette.responses import Response

from tenancy.domain.value_objects import TenantSlug


class TenantSlugStore:
    """Reads and writes the tenant slug cookie."""

    def __init__(
        self,
        cookie_name: str = "__TENANT_SLUG__",
        max_age_seconds: int = 60 * 60 * 24 * 30,
        secure: bool = False,
    ):
        self._cookie_name = cookie_name
        self._max_age = max_age_seconds
        self._secure = secure

    @property
    def cookie_name(self) -> str:
        """Name of the carrier cookie."""
        return self._cookie_name

    def read_slug(self, request: HTTPConnection) -> str | None:
        """Return the slug carried by the request, or None.

        Values that fail the carrier-safety check are treated as absent.
        """
        raw = request.cookies.get(self._cookie_name)
        if not raw:
            return None

        slug = unquote(raw).strip()
        if not TenantSlug.is_safe(slug):
            return None
        return slug

    def write_slug(self, response: Response, slug: str) -> None:
        """Set the carrier on the outgoing response.

        Raises:
            ValueError: If the slug is not safe to carry.
        """
        validated = TenantSlug.from_string(slug)
        response.set_cookie(
            key=self._cookie_name,
            value=quote(validated.value, safe=""),
            max_age=self._max_age,
            path="/",
            secure=self._secure,
            samesite="lax",
        )

    def clear_slug(self, response: Response) -> None:
        """Expire the carrier on the outgoing response."""
        response.delete_cookie(
            key=self._cookie_name,
            path="/",
            secure=self._secure,
            samesite="lax",
        )
