"""Value objects for the tenancy domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for tenant identifiers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Carrier safety only: no separators, whitespace, quotes or path segments.
_SLUG_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]{0,99}$")


@dataclass(frozen=True)
class TenantSlug:
    """Human-facing tenant identifier as it appears in URLs and the carrier.

    A slug is untrusted input: passing validation only means it is safe to
    store in a cookie and to splice into a path. Whether it names a real
    tenant is decided by the resolver.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def is_safe(cls, value: str) -> bool:
        """Check whether a raw value is safe to carry as a slug."""
        return bool(_SLUG_PATTERN.match(value))

    @classmethod
    def from_string(cls, value: str) -> TenantSlug:
        """Create TenantSlug from a raw string.

        Args:
            value: Raw slug value

        Returns:
            TenantSlug instance

        Raises:
            ValueError: If value is not safe to carry
        """
        if not cls.is_safe(value):
            raise ValueError(f"Invalid tenant slug: {value!r}")
        return cls(value=value)


@dataclass(frozen=True)
class TenantId:
    """Backend-issued tenant identifier.

    Only ever taken from a backend response, never derived from client data.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class TenantRecord:
    """Authoritative slug-to-id mapping returned by the backend.

    The record slug can differ from the slug that was looked up when the
    tenant has been renamed since; links built after resolution use
    ``slug`` from the record.
    """

    id: TenantId
    slug: TenantSlug
