"""Port for persisting and reloading the inactive accounts report."""

from pathlib import Path
from typing import Protocol

from src.domain.models.accounts import OrganizationAccount


class InactiveAccountsReportPort(Protocol):
    """Port exposing the durable hand-off between detection and cleanup."""

    def write_report(
        self,
        accounts: list[OrganizationAccount],
        path: Path,
    ) -> Path:
        """Persist accounts to path and return the written path."""

    def read_report(self, path: Path) -> list[OrganizationAccount]:
        """Load the accounts listed in a previously written report."""


__all__ = ["InactiveAccountsReportPort"]
