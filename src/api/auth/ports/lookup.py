"""Current-user lookup protocol."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from auth.domain.value_objects import CurrentUser


class CurrentUserLookup(Protocol):
    """Asks the backend who the caller is."""

    async def fetch(
        self,
        cookies: Mapping[str, str] | None = None,
        authorization: str | None = None,
    ) -> CurrentUser | None:
        """Return the caller's identity, or None when not signed in.

        Raises:
            CurrentUserLookupError: If the lookup could not be completed.
        """
        ...
