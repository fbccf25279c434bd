"""Use case deleting workspaces listed in the inactive accounts report.

The report is re-read from disk so operators can review or edit it between
detection and deletion. Rows are processed one at a time in file order and a
failed deletion never stops the batch.
"""

from pathlib import Path

from src.application.ports.inactive_report import InactiveAccountsReportPort
from src.application.ports.workspace_deleter import WorkspaceDeleterPort
from src.domain.models.cleanup import (
    STATUS_DELETED,
    STATUS_FAILED,
    STATUS_SKIPPED,
    CleanupSummary,
    WorkspaceCleanupOutcome,
)
from src.infrastructure.logging.logger import get_app_logger, get_audit_logger


class CleanupWorkspacesUseCase:
    """Delete the workspace of every account listed in a report."""

    def __init__(
        self,
        report_store: InactiveAccountsReportPort,
        workspace_deleter: WorkspaceDeleterPort,
        logger=None,
        audit_logger=None,
        dry_run: bool = False,
    ) -> None:
        """Initialize the use case.

        Args:
            report_store: Port reading the persisted report.
            workspace_deleter: Port performing the destructive deletion.
            logger: Optional logger compatible with logging.Logger-like API.
            audit_logger: Optional logger receiving one line per deletion.
            dry_run: When True, list targets without deleting anything.
        """
        self._report_store = report_store
        self._workspace_deleter = workspace_deleter
        self._logger = logger or get_app_logger()
        self._audit_logger = audit_logger or get_audit_logger()
        self._dry_run = dry_run

    def run(self, report_path: Path) -> CleanupSummary:
        """Process every row of the report.

        Args:
            report_path: Report written by the audit phase or by hand.

        Returns:
            CleanupSummary: Per-row outcomes in report order.

        Raises:
            ReportFormatError: If the report layout is invalid; raised before
                any workspace is touched.
        """
        accounts = self._report_store.read_report(report_path)
        self._logger.info(
            f"Loaded {len(accounts)} cleanup targets from {report_path}"
        )

        outcomes = [self._process(account.name) for account in accounts]
        summary = CleanupSummary(outcomes=tuple(outcomes))
        self._logger.info(
            f"Cleanup finished: deleted={summary.deleted_count}, "
            f"failed={summary.failed_count}, skipped={summary.skipped_count}"
        )
        return summary

    def _process(self, name: str) -> WorkspaceCleanupOutcome:
        """Delete a single workspace and classify the outcome."""
        if not name.strip():
            self._logger.warning("Skipping report row with an empty name")
            return WorkspaceCleanupOutcome(name=name, status=STATUS_SKIPPED)

        if self._dry_run:
            self._logger.info(f"[dry-run] Would delete workspace for {name}")
            return WorkspaceCleanupOutcome(name=name, status=STATUS_SKIPPED)

        self._logger.info(f"Deleting workspace for account: {name}")
        result = self._workspace_deleter.delete_workspace(name)
        if result.success:
            self._logger.info(f"Successfully deleted workspace for {name}")
            self._audit_logger.info(f"deleted workspace={name}")
            return WorkspaceCleanupOutcome(name=name, status=STATUS_DELETED)

        error = result.error.strip()
        self._logger.error(f"Failed to delete workspace for {name}: {error}")
        self._audit_logger.error(f"failed workspace={name} error={error}")
        return WorkspaceCleanupOutcome(
            name=name,
            status=STATUS_FAILED,
            error=error,
        )


__all__ = ["CleanupWorkspacesUseCase"]
