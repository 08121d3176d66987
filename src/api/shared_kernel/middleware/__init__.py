"""Shared middleware for cross-cutting concerns.

This module contains value objects and probes that are shared across
bounded contexts. The tenant context value object is the primary
component, carrying the tenant a tenant-scoped request runs under.
"""
