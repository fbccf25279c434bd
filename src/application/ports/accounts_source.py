"""Port for reading organization accounts from the remote service."""

from typing import Protocol

from src.domain.models.accounts import OrganizationAccount


class AccountsSourcePort(Protocol):
    """Port exposing read access to the remote accounts listing."""

    def fetch_accounts(self) -> list[OrganizationAccount]:
        """Return a snapshot of every account visible to the credential."""


__all__ = ["AccountsSourcePort"]
