"""Unit tests for HttpCurrentUserLookup."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from auth.domain.value_objects import CurrentUser
from auth.infrastructure.current_user_lookup import (
    CURRENT_USER_PATH,
    HttpCurrentUserLookup,
)
from auth.observability import DefaultCurrentUserLookupProbe
from auth.ports.exceptions import CurrentUserLookupError

BASE_URL = "http://backend.test"


@pytest.fixture
def mock_probe() -> MagicMock:
    """Provide a mock lookup probe."""
    return MagicMock(spec=DefaultCurrentUserLookupProbe)


@pytest.fixture
def lookup(mock_probe) -> HttpCurrentUserLookup:
    """Provide a lookup with a mock probe."""
    return HttpCurrentUserLookup(base_url=BASE_URL, timeout_seconds=5.0, probe=mock_probe)


@pytest.fixture
def mock_client_class():
    """Patch httpx.AsyncClient."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client_class.return_value.__aenter__.return_value = AsyncMock()
        yield mock_client_class


def _client(mock_client_class) -> AsyncMock:
    return mock_client_class.return_value.__aenter__.return_value


class TestFetch:
    """Tests for fetch()."""

    @pytest.mark.asyncio
    async def test_returns_user(
        self, lookup, mock_client_class, mock_probe, http_response_factory
    ):
        """A user payload is returned as CurrentUser."""
        _client(mock_client_class).get.return_value = http_response_factory(
            200, {"id": "u-1", "email": "ada@example.com", "name": "Ada"}
        )

        user = await lookup.fetch()

        assert user == CurrentUser(id="u-1", email="ada@example.com", name="Ada")
        mock_probe.user_found.assert_called_once_with(user_id="u-1")

    @pytest.mark.asyncio
    async def test_forwards_credentials(
        self, lookup, mock_client_class, http_response_factory
    ):
        """Caller cookies and Authorization header reach the backend."""
        _client(mock_client_class).get.return_value = http_response_factory(
            200, {"user": {"id": "u-1"}}
        )

        await lookup.fetch(cookies={"session": "abc"}, authorization="Bearer t")

        mock_client_class.assert_called_once_with(
            base_url=BASE_URL, timeout=5.0, cookies={"session": "abc"}
        )
        _client(mock_client_class).get.assert_awaited_once_with(
            CURRENT_USER_PATH,
            headers={"Accept": "application/json", "Authorization": "Bearer t"},
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 403])
    async def test_not_signed_in(
        self, lookup, mock_client_class, mock_probe, http_response_factory, status_code
    ):
        """401 and 403 mean nobody is signed in."""
        _client(mock_client_class).get.return_value = http_response_factory(
            status_code, None
        )

        assert await lookup.fetch() is None
        mock_probe.user_not_signed_in.assert_called_once_with(status_code=status_code)

    @pytest.mark.asyncio
    async def test_payload_without_id_is_signed_out(
        self, lookup, mock_client_class, http_response_factory
    ):
        """A payload without an id carries no identity."""
        _client(mock_client_class).get.return_value = http_response_factory(
            200, {"data": None}
        )

        assert await lookup.fetch() is None

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, lookup, mock_client_class, mock_probe):
        """Transport failures raise CurrentUserLookupError."""
        _client(mock_client_class).get.side_effect = httpx.ConnectError("refused")

        with pytest.raises(CurrentUserLookupError):
            await lookup.fetch()

        mock_probe.lookup_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_server_error_raises(
        self, lookup, mock_client_class, http_response_factory
    ):
        """Unexpected statuses raise CurrentUserLookupError."""
        _client(mock_client_class).get.return_value = http_response_factory(500, None)

        with pytest.raises(CurrentUserLookupError):
            await lookup.fetch()
