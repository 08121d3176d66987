"""Resolver protocol shared by every tenant-scoped call site."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tenancy.domain.value_objects import TenantRecord


@runtime_checkable
class TenantResolver(Protocol):
    """Resolves a tenant slug into its canonical record.

    Implementations must be idempotent and side-effect free: repeated calls
    with the same slug and unchanged backend state return the same record.
    """

    async def resolve(self, slug: str) -> TenantRecord:
        """Resolve a slug.

        Raises:
            TenantNotFoundError: If no tenant has this slug.
            TenantUnavailableError: If the lookup could not be completed.
        """
        ...

    def invalidate(self, slug: str | None = None) -> None:
        """Drop any cached record for ``slug`` (or all records when None).

        Called on tenant switch and sign-out. A no-op for resolvers that
        do not cache.
        """
        ...
