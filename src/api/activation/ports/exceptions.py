"""Exceptions for the activation bounded context."""


class ActivationStatusError(Exception):
    """Raised when the activation status could not be fetched or read."""

    pass
