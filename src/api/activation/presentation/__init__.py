"""Activation presentation layer."""

from activation.presentation.routes import router

__all__ = ["router"]
