"""Use case detecting inactive organizations and persisting the report.

The use case drives the detection half of the workflow:

* fetches a snapshot of organizations from the remote service;
* derives the cutoff once from the injected clock;
* keeps organizations whose last activity is strictly older than the cutoff;
* writes them to the durable report consumed later by the cleanup phase.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from src.application.ports.accounts_source import AccountsSourcePort
from src.application.ports.inactive_report import InactiveAccountsReportPort
from src.domain.constants import DEFAULT_RETENTION_DAYS
from src.domain.models.accounts import OrganizationAccount
from src.domain.policies.inactivity import compute_cutoff
from src.domain.services.inactivity import filter_inactive_accounts
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class InactiveAccountsAudit:
    """Result of an audit run.

    Attributes:
        accounts: Every account fetched from the remote service.
        inactive_accounts: Accounts older than the cutoff, in source order.
        cutoff: Instant used to classify accounts.
        report_path: Location of the written report.
    """

    accounts: tuple[OrganizationAccount, ...]
    inactive_accounts: tuple[OrganizationAccount, ...]
    cutoff: datetime
    report_path: Path

    @property
    def fetched_count(self) -> int:
        return len(self.accounts)

    @property
    def inactive_count(self) -> int:
        return len(self.inactive_accounts)


class AuditInactiveAccountsUseCase:
    """Find organizations inactive beyond the retention window."""

    def __init__(
        self,
        accounts_source: AccountsSourcePort,
        report_store: InactiveAccountsReportPort,
        clock: Callable[[], datetime] | None = None,
        retention_days: int = DEFAULT_RETENTION_DAYS,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_source: Port listing organizations from the service.
            report_store: Port persisting the inactive accounts report.
            clock: Callable returning the current aware time; UTC by default.
            retention_days: Retention window in days.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_source = accounts_source
        self._report_store = report_store
        self._clock = clock or _utc_now
        self._retention_days = retention_days
        self._logger = logger or get_app_logger()

    def run(self, report_path: Path) -> InactiveAccountsAudit:
        """Execute the audit and write the report.

        Args:
            report_path: Destination of the report, overwritten if present.

        Returns:
            InactiveAccountsAudit: Fetched and inactive accounts plus metadata.
        """
        cutoff = compute_cutoff(self._clock(), self._retention_days)

        accounts = self._accounts_source.fetch_accounts()
        self._logger.info(f"Fetched {len(accounts)} accounts")

        inactive = filter_inactive_accounts(accounts, cutoff)
        self._logger.info(
            f"Found {len(inactive)} accounts with no activity since "
            f"{cutoff.isoformat()}"
        )

        written_path = self._report_store.write_report(inactive, report_path)
        self._logger.info(f"Wrote inactive accounts report to {written_path}")

        return InactiveAccountsAudit(
            accounts=tuple(accounts),
            inactive_accounts=tuple(inactive),
            cutoff=cutoff,
            report_path=written_path,
        )


__all__ = ["AuditInactiveAccountsUseCase", "InactiveAccountsAudit"]
