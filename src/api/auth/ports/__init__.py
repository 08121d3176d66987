"""Auth ports."""

from auth.ports.exceptions import CurrentUserLookupError
from auth.ports.lookup import CurrentUserLookup

__all__ = [
    "CurrentUserLookup",
    "CurrentUserLookupError",
]
