"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from auth.domain.value_objects import CurrentUser
from infrastructure.settings import RoutingSettings
from tenancy.domain.value_objects import TenantId, TenantRecord, TenantSlug
from tenancy.infrastructure.slug_store import TenantSlugStore


@pytest.fixture
def routing_settings() -> RoutingSettings:
    """Provide routing settings with an edge session cookie configured."""
    return RoutingSettings(
        login_path="/login",
        return_param="next",
        no_tenant_path="/org",
        session_cookie_name="session",
        redirect_status_code=307,
    )


@pytest.fixture
def slug_store() -> TenantSlugStore:
    """Provide a slug carrier with default cookie name."""
    return TenantSlugStore(cookie_name="__TENANT_SLUG__")


@pytest.fixture
def acme_record() -> TenantRecord:
    """Provide the resolved record for the 'acme' tenant."""
    return TenantRecord(id=TenantId(value="t-123"), slug=TenantSlug(value="acme"))


@pytest.fixture
def current_user() -> CurrentUser:
    """Provide a signed-in user."""
    return CurrentUser(id="u-1", email="ada@example.com", name="Ada", role="admin")


@pytest.fixture
def mock_resolver(acme_record: TenantRecord) -> MagicMock:
    """Provide a tenant resolver that resolves every slug to 'acme'."""
    resolver = MagicMock()
    resolver.resolve = AsyncMock(return_value=acme_record)
    resolver.invalidate = MagicMock()
    return resolver


def make_http_response(status_code: int = 200, payload=None) -> MagicMock:
    """Build a mocked httpx response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def http_response_factory():
    """Provide a factory for mocked httpx responses."""
    return make_http_response
