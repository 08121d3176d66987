"""Activation infrastructure adapters."""
