"""Routing domain layer: categories, decisions, classifier and policy."""

from routing.domain.classifier import (
    classify,
    strip_tenant_prefix,
    tenant_scoped_path,
)
from routing.domain.policy import decide
from routing.domain.value_objects import (
    Allow,
    AuthStatus,
    RedirectToAuth,
    RedirectToNoTenant,
    RewriteTo,
    RouteCategory,
    RoutingDecision,
)

__all__ = [
    "Allow",
    "AuthStatus",
    "RedirectToAuth",
    "RedirectToNoTenant",
    "RewriteTo",
    "RouteCategory",
    "RoutingDecision",
    "classify",
    "decide",
    "strip_tenant_prefix",
    "tenant_scoped_path",
]
