"""Unit tests for HttpTenantResolver.

The backend is replaced by patching httpx.AsyncClient.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from tenancy.domain.value_objects import TenantId, TenantRecord, TenantSlug
from tenancy.infrastructure.observability import DefaultTenantResolverProbe
from tenancy.infrastructure.tenant_resolver import LOOKUP_PATH, HttpTenantResolver
from tenancy.ports.exceptions import TenantNotFoundError, TenantUnavailableError
from tenancy.ports.resolvers import TenantResolver

BASE_URL = "http://backend.test"


@pytest.fixture
def mock_probe() -> MagicMock:
    """Provide a mock resolver probe."""
    return MagicMock(spec=DefaultTenantResolverProbe)


@pytest.fixture
def resolver(mock_probe: MagicMock) -> HttpTenantResolver:
    """Provide a resolver with a mock probe."""
    return HttpTenantResolver(base_url=BASE_URL, timeout_seconds=5.0, probe=mock_probe)


@pytest.fixture
def mock_client():
    """Patch httpx.AsyncClient and yield the client used inside ``async with``."""
    with patch("httpx.AsyncClient") as mock_client_class:
        client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = client
        client.client_class = mock_client_class
        yield client


class TestResolveSuccess:
    """Tests for successful resolution."""

    @pytest.mark.asyncio
    async def test_resolves_flat_payload(
        self, resolver, mock_client, mock_probe, http_response_factory
    ):
        """A ``{id, slug}`` payload becomes a TenantRecord."""
        mock_client.get.return_value = http_response_factory(
            200, {"id": "t-123", "slug": "acme"}
        )

        record = await resolver.resolve("acme")

        assert record == TenantRecord(id=TenantId("t-123"), slug=TenantSlug("acme"))
        mock_client.get.assert_awaited_once_with(LOOKUP_PATH, params={"slug": "acme"})
        mock_client.client_class.assert_called_once_with(
            base_url=BASE_URL, timeout=5.0
        )
        mock_probe.tenant_resolved.assert_called_once_with(
            slug="acme", tenant_id="t-123", record_slug="acme"
        )

    @pytest.mark.asyncio
    async def test_resolves_data_envelope(
        self, resolver, mock_client, http_response_factory
    ):
        """A ``{data: {...}}`` envelope is unwrapped."""
        mock_client.get.return_value = http_response_factory(
            200, {"data": {"id": 42, "slug": "acme"}}
        )

        record = await resolver.resolve("acme")

        assert record.id.value == "42"

    @pytest.mark.asyncio
    async def test_slug_defaults_to_requested_slug(
        self, resolver, mock_client, http_response_factory
    ):
        """A payload without a slug keeps the slug that was looked up."""
        mock_client.get.return_value = http_response_factory(200, {"id": "t-123"})

        record = await resolver.resolve("acme")

        assert record.slug.value == "acme"

    @pytest.mark.asyncio
    async def test_renamed_tenant_returns_current_slug(
        self, resolver, mock_client, mock_probe, http_response_factory
    ):
        """An old slug resolves to the record's current slug."""
        mock_client.get.return_value = http_response_factory(
            200, {"id": "t-123", "slug": "acme-inc"}
        )

        record = await resolver.resolve("acme")

        assert record.slug.value == "acme-inc"
        mock_probe.tenant_slug_renamed.assert_called_once_with(
            slug="acme", record_slug="acme-inc"
        )

    @pytest.mark.asyncio
    async def test_repeated_resolution_is_stable(
        self, resolver, mock_client, http_response_factory
    ):
        """Same slug and unchanged backend state give equal records."""
        mock_client.get.return_value = http_response_factory(
            200, {"id": "t-123", "slug": "acme"}
        )

        first = await resolver.resolve("acme")
        second = await resolver.resolve("acme")

        assert first == second


class TestResolveNotFound:
    """Tests for definitive 'no such tenant' answers."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [404, 410])
    async def test_not_found_status(
        self, resolver, mock_client, mock_probe, http_response_factory, status_code
    ):
        """404 and 410 mean the tenant does not exist."""
        mock_client.get.return_value = http_response_factory(status_code, None)

        with pytest.raises(TenantNotFoundError) as exc_info:
            await resolver.resolve("ghost")

        assert exc_info.value.slug == "ghost"
        mock_probe.tenant_not_found.assert_called_once_with(slug="ghost")

    @pytest.mark.asyncio
    async def test_null_data_is_not_found(
        self, resolver, mock_client, http_response_factory
    ):
        """``{data: null}`` is a definitive 'not found'."""
        mock_client.get.return_value = http_response_factory(200, {"data": None})

        with pytest.raises(TenantNotFoundError):
            await resolver.resolve("ghost")

    @pytest.mark.asyncio
    async def test_unsafe_slug_never_hits_backend(self, resolver, mock_client):
        """A slug that cannot name a tenant is rejected without a network call."""
        with pytest.raises(TenantNotFoundError):
            await resolver.resolve("../etc/passwd")

        mock_client.get.assert_not_called()


class TestResolveUnavailable:
    """Tests for failures where the tenant's existence is unknown."""

    @pytest.mark.asyncio
    async def test_timeout(self, resolver, mock_client, mock_probe):
        """A timeout is Unavailable, never NotFound."""
        mock_client.get.side_effect = httpx.ReadTimeout("slow")

        with pytest.raises(TenantUnavailableError) as exc_info:
            await resolver.resolve("acme")

        assert exc_info.value.reason.startswith("timeout")
        mock_probe.tenant_lookup_unavailable.assert_called_once()
        mock_probe.tenant_not_found.assert_not_called()

    @pytest.mark.asyncio
    async def test_transport_error(self, resolver, mock_client):
        """Connection failures are Unavailable."""
        mock_client.get.side_effect = httpx.ConnectError("refused")

        with pytest.raises(TenantUnavailableError) as exc_info:
            await resolver.resolve("acme")

        assert exc_info.value.reason.startswith("transport error")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 500, 502, 503])
    async def test_unexpected_status(
        self, resolver, mock_client, http_response_factory, status_code
    ):
        """Statuses other than success and not-found are Unavailable."""
        mock_client.get.return_value = http_response_factory(status_code, None)

        with pytest.raises(TenantUnavailableError) as exc_info:
            await resolver.resolve("acme")

        assert exc_info.value.reason == f"unexpected status {status_code}"

    @pytest.mark.asyncio
    async def test_invalid_json(self, resolver, mock_client, http_response_factory):
        """A non-JSON body is Unavailable."""
        response = http_response_factory(200, None)
        response.json.side_effect = ValueError("not json")
        mock_client.get.return_value = response

        with pytest.raises(TenantUnavailableError):
            await resolver.resolve("acme")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            ["t-123"],
            {"slug": "acme"},
            {"id": "", "slug": "acme"},
            {"id": "t-123", "slug": "bad/slug"},
        ],
    )
    async def test_malformed_payload(
        self, resolver, mock_client, http_response_factory, payload
    ):
        """Payloads that are not a usable tenant record are Unavailable."""
        mock_client.get.return_value = http_response_factory(200, payload)

        with pytest.raises(TenantUnavailableError):
            await resolver.resolve("acme")


class TestProtocol:
    """Tests for the TenantResolver port."""

    def test_satisfies_protocol(self, resolver):
        """HttpTenantResolver implements TenantResolver."""
        assert isinstance(resolver, TenantResolver)

    def test_invalidate_is_noop(self, resolver):
        """The uncached resolver accepts invalidation calls."""
        resolver.invalidate("acme")
        resolver.invalidate()
