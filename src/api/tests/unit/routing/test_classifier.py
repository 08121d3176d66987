"""Unit tests for the path classifier."""

from __future__ import annotations

import pytest

from routing.domain.classifier import (
    LEGACY_PREFIXES,
    classify,
    strip_tenant_prefix,
    tenant_scoped_path,
)
from routing.domain.value_objects import RouteCategory


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        "path",
        [
            "/_next/static/chunks/main.js",
            "/favicon.ico",
            "/robots.txt",
            "/images/logo.png",
            "/careers",
            "/careers/acme/jobs/42",
        ],
    )
    def test_public_assets(self, path: str) -> None:
        """Static assets and the public careers site are public."""
        assert classify(path) is RouteCategory.PUBLIC_ASSET

    @pytest.mark.parametrize("path", ["/api", "/api/org/switch", "/health"])
    def test_api_endpoints(self, path: str) -> None:
        """Paths under the API boundary are API endpoints."""
        assert classify(path) is RouteCategory.API_ENDPOINT

    @pytest.mark.parametrize("path", ["/login", "/signup", "/forgot-password"])
    def test_auth_pages(self, path: str) -> None:
        """Exact auth page paths are auth pages."""
        assert classify(path) is RouteCategory.AUTH_PAGE

    def test_auth_page_match_is_exact(self) -> None:
        """A path below an auth page is not itself an auth page."""
        assert classify("/login/extra") is RouteCategory.UNCLASSIFIED

    @pytest.mark.parametrize(
        "path", ["/org", "/org/acme", "/org/acme/people/123"]
    )
    def test_tenant_scoped_paths(self, path: str) -> None:
        """Paths under /org are already tenant-scoped."""
        assert classify(path) is RouteCategory.TENANT_SCOPED_PATH

    @pytest.mark.parametrize("prefix", sorted(LEGACY_PREFIXES))
    def test_every_legacy_prefix(self, prefix: str) -> None:
        """Each legacy top-level prefix classifies as a legacy path."""
        assert classify(f"/{prefix}") is RouteCategory.LEGACY_TENANT_PATH
        assert classify(f"/{prefix}/anything") is RouteCategory.LEGACY_TENANT_PATH

    def test_legacy_path_with_query(self) -> None:
        """The query string does not affect classification."""
        assert (
            classify("/people/123?tab=profile") is RouteCategory.LEGACY_TENANT_PATH
        )

    def test_prefix_match_is_segment_aware(self) -> None:
        """A path merely starting with a prefix's letters is not under it."""
        assert classify("/apiary") is RouteCategory.UNCLASSIFIED
        assert classify("/organic") is RouteCategory.UNCLASSIFIED
        assert classify("/peoples") is RouteCategory.UNCLASSIFIED

    @pytest.mark.parametrize("path", ["/", "/dashboard", "/unknown/page"])
    def test_unclassified(self, path: str) -> None:
        """Anything else is unclassified (protected by default)."""
        assert classify(path) is RouteCategory.UNCLASSIFIED

    @pytest.mark.parametrize("path", ["", "people", "?x=1"])
    def test_malformed_paths_are_unclassified(self, path: str) -> None:
        """Classification is total: malformed input is never rejected."""
        assert classify(path) is RouteCategory.UNCLASSIFIED


class TestTenantScopedPath:
    """Tests for tenant_scoped_path() and strip_tenant_prefix()."""

    def test_builds_tenant_scoped_path(self) -> None:
        """The slug is spliced in after /org."""
        assert tenant_scoped_path("acme", "/people/123") == "/org/acme/people/123"

    def test_keeps_query_verbatim(self) -> None:
        """The query string is carried over unchanged."""
        assert (
            tenant_scoped_path("acme", "/people/123?tab=profile")
            == "/org/acme/people/123?tab=profile"
        )

    @pytest.mark.parametrize(
        "path",
        ["/people", "/people/123?tab=profile", "/settings/members", "/"],
    )
    def test_strip_inverts_tenant_scoped_path(self, path: str) -> None:
        """Stripping the prefix of a built path yields the original path."""
        assert strip_tenant_prefix(tenant_scoped_path("acme-inc", path)) == path

    def test_strip_returns_none_outside_tenant_scope(self) -> None:
        """Paths outside /org/<slug> have no tenant prefix."""
        assert strip_tenant_prefix("/people/123") is None
        assert strip_tenant_prefix("/org") is None
        assert strip_tenant_prefix("/org/") is None

    def test_strip_bare_tenant_root(self) -> None:
        """The tenant root itself strips to an empty suffix."""
        assert strip_tenant_prefix("/org/acme") == ""
