"""Tenant routing ASGI middleware.

Runs, for every HTTP request and in this order: path classification, slug
carrier read, edge auth status, routing decision. The decision is applied
exactly once: pass through, rewrite the ASGI scope in place of the original
path, or answer with a redirect. No network calls happen here.
"""

from __future__ import annotations

from urllib.parse import quote, urlencode

from starlette.requests import HTTPConnection
from starlette.responses import RedirectResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from infrastructure.settings import RoutingSettings
from routing.domain.classifier import classify, tenant_scoped_path
from routing.domain.policy import decide
from routing.domain.value_objects import (
    Allow,
    AuthStatus,
    RedirectToAuth,
    RedirectToNoTenant,
    RewriteTo,
    RoutingDecision,
)
from routing.observability import DefaultRoutingProbe, RoutingProbe
from shared_kernel.observability_context import ObservationContext
from tenancy.infrastructure.slug_store import TenantSlugStore

ORIGINAL_PATH_STATE_KEY = "original_path"


class RoutingMiddleware:
    """Applies the tenant routing decision to incoming HTTP requests."""

    def __init__(
        self,
        app: ASGIApp,
        slug_store: TenantSlugStore,
        settings: RoutingSettings,
        probe: RoutingProbe | None = None,
    ) -> None:
        self.app = app
        self._slug_store = slug_store
        self._settings = settings
        self._probe = probe or DefaultRoutingProbe()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        connection = HTTPConnection(scope)
        path = scope["path"]
        original = _original_path(scope)
        slug = self._slug_store.read_slug(connection)
        probe = self._probe.with_context(
            ObservationContext(
                request_id=connection.headers.get("x-request-id"),
                tenant_slug=slug,
            )
        )

        try:
            category = classify(path)
            decision = decide(
                category=category,
                slug=slug,
                auth=self._auth_status(connection),
                path=original,
            )
        except Exception as e:
            probe.routing_failed(path=original, error=e)
            await self.app(scope, receive, send)
            return

        if isinstance(decision, RewriteTo):
            probe.request_rewritten(path=original, target=decision.path, slug=slug or "")
            await self.app(_rewrite_scope(scope, slug or "", original), receive, send)
            return

        location = self._redirect_location(decision)
        if location is None or location.split("?", 1)[0] == path:
            probe.request_allowed(path=original, category=category.value)
            await self.app(scope, receive, send)
            return

        if isinstance(decision, RedirectToAuth):
            probe.redirected_to_auth(path=original, location=location)
        else:
            probe.redirected_to_no_tenant(path=original, location=location)

        response = RedirectResponse(
            url=location,
            status_code=self._settings.redirect_status_code,
        )
        await response(scope, receive, send)

    def _auth_status(self, connection: HTTPConnection) -> AuthStatus:
        """Derive the edge auth status from the session cookie."""
        cookie_name = self._settings.session_cookie_name
        if not cookie_name:
            return AuthStatus.UNKNOWN
        if connection.cookies.get(cookie_name):
            return AuthStatus.AUTHENTICATED
        return AuthStatus.ANONYMOUS

    def _redirect_location(self, decision: RoutingDecision) -> str | None:
        if isinstance(decision, RedirectToAuth):
            return login_location(self._settings, decision.return_path)
        if isinstance(decision, RedirectToNoTenant):
            return self._settings.no_tenant_path
        if isinstance(decision, Allow):
            return None
        raise TypeError(f"Unhandled routing decision: {decision!r}")


def login_location(settings: RoutingSettings, return_path: str) -> str:
    """Build the auth page URL carrying ``return_path`` as a query parameter."""
    query = urlencode({settings.return_param: return_path})
    return f"{settings.login_path}?{query}"


def original_request_path(connection: HTTPConnection) -> str:
    """Path plus query string the client asked for, before any rewrite.

    Return paths handed to the auth page must use this, never the
    tenant-scoped path the request was rewritten to.
    """
    state = connection.scope.get("state") or {}
    return state.get(ORIGINAL_PATH_STATE_KEY) or _original_path(connection.scope)


def _original_path(scope: Scope) -> str:
    query = scope.get("query_string", b"").decode("latin-1")
    if query:
        return f"{scope['path']}?{query}"
    return scope["path"]


def _rewrite_scope(scope: Scope, slug: str, original: str) -> Scope:
    """Return a copy of ``scope`` serving the tenant-scoped form of its path.

    Only the path gains the ``/org/<slug>`` prefix; the query string is
    carried over byte for byte.
    """
    path = scope["path"]
    raw_path = scope.get("raw_path") or quote(path).encode("ascii")
    prefix = tenant_scoped_path(slug, "")

    rewritten = dict(scope)
    rewritten["path"] = prefix + path
    rewritten["raw_path"] = prefix.encode("ascii") + raw_path
    rewritten["state"] = {
        **(scope.get("state") or {}),
        ORIGINAL_PATH_STATE_KEY: original,
    }
    return rewritten
