"""Tenancy bounded context.

Owns the tenant slug carrier, the single slug-to-record resolution
contract, and the FastAPI dependencies that hand a resolved tenant to
tenant-scoped endpoints.
"""
