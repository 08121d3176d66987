"""Unit tests for auth FastAPI dependencies."""

from __future__ import annotations

from typing import Annotated
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from auth.dependencies import (
    get_current_user,
    get_current_user_lookup,
    require_api_user,
)
from auth.domain.value_objects import CurrentUser
from routing.presentation.middleware import RoutingMiddleware


@pytest.fixture
def mock_lookup() -> MagicMock:
    """Provide a current-user lookup returning nobody."""
    lookup = MagicMock()
    lookup.fetch = AsyncMock(return_value=None)
    return lookup


@pytest.fixture
def client(mock_lookup) -> TestClient:
    """App exposing one page and one JSON endpoint behind the gate."""
    app = FastAPI()

    @app.get("/org/{org_slug}/jobs")
    async def page(user: Annotated[CurrentUser, Depends(get_current_user)]) -> dict:
        return {"user": user.id}

    @app.get("/api/me")
    async def api(user: Annotated[CurrentUser, Depends(require_api_user)]) -> dict:
        return {"user": user.id}

    app.dependency_overrides[get_current_user_lookup] = lambda: mock_lookup
    return TestClient(app, follow_redirects=False)


class TestGetCurrentUser:
    """Tests for the page dependency."""

    def test_signed_in_user_is_returned(self, client, mock_lookup, current_user):
        """A confirmed identity reaches the view."""
        mock_lookup.fetch = AsyncMock(return_value=current_user)

        response = client.get("/org/acme/jobs")

        assert response.json() == {"user": "u-1"}

    def test_signed_out_redirects_with_return_path(self, client):
        """No identity redirects to the auth page with the current path."""
        response = client.get("/org/acme/jobs?tab=open")

        assert response.status_code == 307
        assert (
            response.headers["location"]
            == "/login?next=%2Forg%2Facme%2Fjobs%3Ftab%3Dopen"
        )

    def test_rewritten_request_returns_to_the_original_path(
        self, mock_lookup, routing_settings, slug_store
    ):
        """After a legacy rewrite the return path is what the client asked for."""
        app = FastAPI()

        @app.get("/org/{org_slug}/jobs")
        async def page(
            user: Annotated[CurrentUser, Depends(get_current_user)],
        ) -> dict:
            return {"user": user.id}

        app.dependency_overrides[get_current_user_lookup] = lambda: mock_lookup
        app.add_middleware(
            RoutingMiddleware, slug_store=slug_store, settings=routing_settings
        )
        client = TestClient(
            app,
            cookies={"session": "expired", "__TENANT_SLUG__": "acme"},
            follow_redirects=False,
        )

        response = client.get("/jobs?tab=open")

        assert response.status_code == 307
        assert response.headers["location"] == "/login?next=%2Fjobs%3Ftab%3Dopen"

    def test_lookup_failure_redirects(self, client, mock_lookup):
        """A failing lookup is treated like a signed-out caller."""
        mock_lookup.fetch = AsyncMock(side_effect=RuntimeError("boom"))

        response = client.get("/org/acme/jobs")

        assert response.status_code == 307

    def test_credentials_are_forwarded(self, client, mock_lookup, current_user):
        """Caller cookies and Authorization header are passed to the lookup."""
        mock_lookup.fetch = AsyncMock(return_value=current_user)
        client.cookies.set("session", "abc")

        client.get("/org/acme/jobs", headers={"Authorization": "Bearer t"})

        kwargs = mock_lookup.fetch.await_args.kwargs
        assert kwargs["cookies"]["session"] == "abc"
        assert kwargs["authorization"] == "Bearer t"


class TestRequireApiUser:
    """Tests for the JSON dependency."""

    def test_signed_out_is_401(self, client):
        """JSON endpoints answer 401 instead of redirecting."""
        response = client.get("/api/me")

        assert response.status_code == 401

    def test_signed_in_user_is_returned(self, client, mock_lookup, current_user):
        """A confirmed identity reaches the endpoint."""
        mock_lookup.fetch = AsyncMock(return_value=current_user)

        response = client.get("/api/me")

        assert response.json() == {"user": "u-1"}
