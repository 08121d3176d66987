"""Routing presentation layer (ASGI middleware)."""

from routing.presentation.middleware import (
    RoutingMiddleware,
    login_location,
    original_request_path,
)

__all__ = [
    "RoutingMiddleware",
    "login_location",
    "original_request_path",
]
