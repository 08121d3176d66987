"""Auth application layer."""

from auth.application.gate import AuthGate

__all__ = [
    "AuthGate",
]
