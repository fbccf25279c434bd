"""Domain models for remote organization accounts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OrganizationAccount:
    """Read-only snapshot of an organization returned by the remote service.

    Attributes:
        name: Organization name, empty when the source omitted it.
        last_activity_at: Raw last-activity timestamp, kept verbatim.
    """

    name: str
    last_activity_at: str | None


__all__ = ["OrganizationAccount"]
