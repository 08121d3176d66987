"""Shared Kernel module.

Components every bounded context may depend on: the per-request
observation context and the resolved tenant context. The kernel imports
none of the contexts (routing, tenancy, auth, activation).
"""
