"""Exceptions for the auth bounded context."""


class CurrentUserLookupError(Exception):
    """Raised when the current-user lookup could not be completed.

    Distinct from "not signed in", which the lookup reports as ``None``.
    The auth gate treats both the same way.
    """

    pass
