"""Tenancy infrastructure adapters."""
