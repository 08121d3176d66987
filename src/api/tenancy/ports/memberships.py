"""Membership lookup protocol."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tenancy.domain.memberships import OrgMembership


class MembershipLookup(Protocol):
    """Lists the organizations the caller belongs to."""

    async def fetch(
        self,
        cookies: Mapping[str, str] | None = None,
        authorization: str | None = None,
    ) -> list[OrgMembership]:
        """Return the caller's memberships, in backend order.

        Raises:
            MembershipLookupError: If the list could not be fetched.
        """
        ...
