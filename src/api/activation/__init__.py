"""Activation bounded context.

Read-only projection of the per-tenant onboarding checklist ("Getting
started"). Completion is owned by the backend; this context only maps the
fixed step catalog onto the backend's completed keys.
"""
