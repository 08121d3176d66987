"""Organization memberships of the signed-in user."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

OWNER = "OWNER"
ADMIN = "ADMIN"
MANAGER = "MANAGER"
EMPLOYEE = "EMPLOYEE"


@dataclass(frozen=True)
class OrgMembership:
    """One organization the user belongs to, with their role in it.

    ``role`` is stored upper-cased; roles outside the known set are kept
    as-is and simply carry no flags.
    """

    org_id: str
    org_slug: str
    org_name: str
    role: str = ""
    plan: str | None = None
    is_default: bool = False

    @property
    def is_owner(self) -> bool:
        return self.role == OWNER

    @property
    def is_admin(self) -> bool:
        """Owners administer their organization too."""
        return self.role in (ADMIN, OWNER)

    @property
    def is_manager(self) -> bool:
        return self.role == MANAGER

    @property
    def is_employee(self) -> bool:
        return self.role == EMPLOYEE

    def matches(self, slug_or_id: str) -> bool:
        """Whether ``slug_or_id`` names this organization (slugs ignore case)."""
        return (
            self.org_slug.lower() == slug_or_id.lower() or self.org_id == slug_or_id
        )


def find_membership(
    memberships: Sequence[OrgMembership], slug_or_id: str
) -> OrgMembership | None:
    """Return the membership named by a slug or id, if the user has it."""
    for membership in memberships:
        if membership.matches(slug_or_id):
            return membership
    return None


def select_current(
    memberships: Sequence[OrgMembership], last_slug: str | None
) -> OrgMembership | None:
    """Pick the organization to preselect.

    The last organization used wins while the user still belongs to it,
    then the backend's default, then the first membership.
    """
    if not memberships:
        return None
    if last_slug:
        last = next((m for m in memberships if m.org_slug == last_slug), None)
        if last is not None:
            return last
    return next((m for m in memberships if m.is_default), memberships[0])
