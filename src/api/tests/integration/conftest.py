"""Integration test fixtures.

Runs the assembled application in-process with the backend adapters
replaced by in-memory fakes, so no backend needs to be running.
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from activation.application.tracker import ActivationTracker
from activation.dependencies import get_activation_tracker
from auth.dependencies import get_current_user_lookup
from auth.domain.value_objects import CurrentUser
from tenancy.dependencies import get_membership_lookup, get_tenant_resolver
from tenancy.domain.memberships import OrgMembership
from tenancy.domain.value_objects import TenantId, TenantRecord, TenantSlug
from tenancy.ports.exceptions import MembershipLookupError, TenantNotFoundError


class FakeBackend:
    """In-memory stand-in for the dashboard backend."""

    def __init__(self) -> None:
        self.tenants: dict[str, TenantRecord] = {
            "acme": TenantRecord(id=TenantId("t-1"), slug=TenantSlug("acme")),
            "globex": TenantRecord(id=TenantId("t-2"), slug=TenantSlug("globex")),
            "initech": TenantRecord(id=TenantId("t-3"), slug=TenantSlug("initech")),
        }
        self.completed: dict[str, frozenset[str]] = {"t-1": frozenset({"create_job"})}
        self.sessions: dict[str, CurrentUser] = {
            "s-ada": CurrentUser(id="u-1", email="ada@example.com", name="Ada"),
        }
        self.memberships: dict[str, list[OrgMembership]] = {
            "u-1": [
                OrgMembership(org_id="t-1", org_slug="acme", org_name="Acme"),
                OrgMembership(org_id="t-2", org_slug="globex", org_name="Globex"),
            ],
        }
        self.invalidations: list[str | None] = []

    async def resolve(self, slug: str) -> TenantRecord:
        record = self.tenants.get(slug)
        if record is None:
            raise TenantNotFoundError(slug)
        return record

    def invalidate(self, slug: str | None = None) -> None:
        self.invalidations.append(slug)

    async def fetch(self, cookies=None, authorization=None) -> CurrentUser | None:
        return self.sessions.get((cookies or {}).get("session", ""))

    async def fetch_completed_keys(self, tenant_id: str) -> frozenset[str]:
        return self.completed.get(tenant_id, frozenset())


class FakeMembershipLookup:
    """Membership side of the fake backend, keyed by the signed-in user."""

    def __init__(self, backend: FakeBackend) -> None:
        self._backend = backend

    async def fetch(self, cookies=None, authorization=None) -> list[OrgMembership]:
        user = await self._backend.fetch(cookies=cookies)
        if user is None:
            raise MembershipLookupError("not signed in")
        return list(self._backend.memberships.get(user.id, []))


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: tests that run the full application stack",
    )


@pytest.fixture
def backend() -> FakeBackend:
    """Provide a fresh fake backend."""
    return FakeBackend()


@pytest_asyncio.fixture
async def async_client(backend: FakeBackend):
    """Create async HTTP client for testing with lifespan support."""
    from main import app

    app.dependency_overrides[get_tenant_resolver] = lambda: backend
    app.dependency_overrides[get_current_user_lookup] = lambda: backend
    app.dependency_overrides[get_membership_lookup] = lambda: FakeMembershipLookup(
        backend
    )
    app.dependency_overrides[get_activation_tracker] = lambda: ActivationTracker(
        source=backend
    )
    try:
        async with LifespanManager(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
    finally:
        app.dependency_overrides.clear()
