"""Routing bounded context.

Classifies request paths and decides, per request and without network
calls, whether to let the request through, rewrite a legacy path into its
tenant-scoped form, or redirect to the auth or no-tenant pages.
"""
