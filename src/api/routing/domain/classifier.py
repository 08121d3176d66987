"""Path classifier.

Maps a request path to exactly one ``RouteCategory``. The function is
total: malformed input is classified (as ``UNCLASSIFIED``), never rejected.
"""

from __future__ import annotations

from routing.domain.value_objects import RouteCategory

TENANT_SCOPE_PREFIX = "/org"

PUBLIC_ASSET_PREFIXES: tuple[str, ...] = (
    "/_next",
    "/static",
    "/assets",
    "/images",
    "/fonts",
    "/favicon.ico",
    "/robots.txt",
    "/sitemap.xml",
    # Public careers site and job applications
    "/careers",
)

API_PREFIXES: tuple[str, ...] = (
    "/api",
    "/health",
)

AUTH_PAGES: frozenset[str] = frozenset(
    {
        "/login",
        "/sign-in",
        "/signin",
        "/signup",
        "/sign-up",
        "/logout",
        "/forgot-password",
        "/reset-password",
    }
)

LEGACY_PREFIXES: frozenset[str] = frozenset(
    {
        "people",
        "performance",
        "documents",
        "time-off",
        "hiring",
        "jobs",
        "candidates",
        "teams",
        "analytics",
        "settings",
        "billing",
        "employee-documents",
    }
)


def _path_only(path: str) -> str:
    return path.split("?", 1)[0]


def _is_under(path: str, prefix: str) -> bool:
    """Segment-aware prefix match: ``/api`` matches ``/api/x``, not ``/apiary``."""
    return path == prefix or path.startswith(prefix + "/")


def classify(path: str) -> RouteCategory:
    """Classify a request path.

    Precedence, first match wins: public asset / API boundary, exact auth
    page, tenant-scoped ``/org`` paths, legacy top-level prefixes, then
    everything else as ``UNCLASSIFIED`` (protected by default).

    Args:
        path: Decoded request path. A query string, if present, is ignored.

    Returns:
        The route category.
    """
    path = _path_only(path)

    if not path.startswith("/"):
        return RouteCategory.UNCLASSIFIED

    if any(_is_under(path, prefix) for prefix in PUBLIC_ASSET_PREFIXES):
        return RouteCategory.PUBLIC_ASSET

    if any(_is_under(path, prefix) for prefix in API_PREFIXES):
        return RouteCategory.API_ENDPOINT

    if path in AUTH_PAGES:
        return RouteCategory.AUTH_PAGE

    if _is_under(path, TENANT_SCOPE_PREFIX):
        return RouteCategory.TENANT_SCOPED_PATH

    first_segment = path[1:].split("/", 1)[0]
    if first_segment in LEGACY_PREFIXES:
        return RouteCategory.LEGACY_TENANT_PATH

    return RouteCategory.UNCLASSIFIED


def tenant_scoped_path(slug: str, path: str) -> str:
    """Build the tenant-scoped form of ``path``, query string included."""
    return f"{TENANT_SCOPE_PREFIX}/{slug}{path}"


def strip_tenant_prefix(path: str) -> str | None:
    """Return everything after ``/org/<slug>``, or None for other paths.

    Inverse of ``tenant_scoped_path``:
    ``strip_tenant_prefix(tenant_scoped_path(s, p)) == p``.
    """
    lead = TENANT_SCOPE_PREFIX + "/"
    if not path.startswith(lead):
        return None

    rest = path[len(lead) :]
    end = len(rest)
    for separator in ("/", "?"):
        index = rest.find(separator)
        if index != -1:
            end = min(end, index)

    if end == 0:
        return None
    return rest[end:]
