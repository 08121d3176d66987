"""Opt-in caching layer over a tenant resolver.

Only successful records are cached; ``NotFound`` and ``Unavailable`` always
go back to the wrapped resolver. Entries expire after the configured TTL
and are dropped explicitly on tenant switch and sign-out.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

from tenancy.domain.value_objects import TenantRecord
from tenancy.infrastructure.observability import (
    DefaultTenantResolverProbe,
    TenantResolverProbe,
)
from tenancy.ports.resolvers import TenantResolver


class CachingTenantResolver:
    """Caches resolved tenant records per slug for a fixed TTL.

    Concurrent callers for the same slug share one in-flight lookup. The
    in-flight entry is removed as soon as the lookup settles, so slugs that
    never resolve leave nothing behind.
    """

    def __init__(
        self,
        inner: TenantResolver,
        ttl: timedelta,
        probe: TenantResolverProbe | None = None,
    ):
        self._inner = inner
        self._ttl = ttl
        self._probe = probe or DefaultTenantResolverProbe()

        self._records: dict[str, tuple[TenantRecord, datetime]] = {}
        self._inflight: dict[str, asyncio.Task[TenantRecord]] = {}
        # Bumped by every invalidation; a lookup that started under an older
        # generation must not write its result back.
        self._generation = 0

    async def resolve(self, slug: str) -> TenantRecord:
        """Return the cached record or resolve through the wrapped resolver."""
        cached = self._get_fresh(slug)
        if cached is not None:
            self._probe.tenant_cache_hit(slug=slug, tenant_id=cached.id.value)
            return cached

        task = self._inflight.get(slug)
        if task is None:
            task = asyncio.ensure_future(self._load(slug, self._generation))
            self._inflight[slug] = task
            task.add_done_callback(lambda done: self._forget(slug, done))

        return await asyncio.shield(task)

    def invalidate(self, slug: str | None = None) -> None:
        """Drop the cached record for ``slug``, or every record when None.

        Lookups already in flight still answer their callers but no longer
        populate the cache.
        """
        self._generation += 1
        if slug is None:
            self._records.clear()
            self._inflight.clear()
        else:
            self._records.pop(slug, None)
            self._inflight.pop(slug, None)
        self._inner.invalidate(slug)
        self._probe.tenant_cache_invalidated(slug=slug)

    async def _load(self, slug: str, generation: int) -> TenantRecord:
        record = await self._inner.resolve(slug)
        if generation == self._generation:
            self._records[slug] = (record, datetime.now(tz=timezone.utc))
        return record

    def _forget(self, slug: str, task: asyncio.Task[TenantRecord]) -> None:
        if self._inflight.get(slug) is task:
            del self._inflight[slug]
        if not task.cancelled():
            # Retrieved here so a failure nobody awaited is not reported.
            task.exception()

    def _get_fresh(self, slug: str) -> TenantRecord | None:
        entry = self._records.get(slug)
        if entry is None:
            return None

        record, stored_at = entry
        if datetime.now(tz=timezone.utc) - stored_at >= self._ttl:
            self._records.pop(slug, None)
            return None
        return record
