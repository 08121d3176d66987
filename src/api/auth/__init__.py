"""Auth bounded context.

Confirms the caller's identity against the backend's current-user endpoint
and guards tenant-scoped views until that identity is known.
"""
