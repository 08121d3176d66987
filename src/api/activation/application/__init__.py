"""Activation application layer."""

from activation.application.tracker import ActivationTracker

__all__ = [
    "ActivationTracker",
]
