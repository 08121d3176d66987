"""Activation ports."""

from activation.ports.exceptions import ActivationStatusError
from activation.ports.status_source import ActivationStatusSource

__all__ = [
    "ActivationStatusError",
    "ActivationStatusSource",
]
