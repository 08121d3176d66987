"""Tenancy presentation layer."""
