"""Tests for the CleanupWorkspacesUseCase."""

from pathlib import Path
from unittest.mock import MagicMock, call

import pytest

from src.application.use_cases.cleanup_workspaces import (
    CleanupWorkspacesUseCase,
)
from src.domain.errors import ReportFormatError
from src.domain.models.accounts import OrganizationAccount
from src.domain.models.cleanup import (
    STATUS_DELETED,
    STATUS_FAILED,
    STATUS_SKIPPED,
    WorkspaceCleanupOutcome,
    WorkspaceDeletionResult,
)


def _report_store(names: list[str]) -> MagicMock:
    store = MagicMock()
    store.read_report.return_value = [
        OrganizationAccount(name, "2020-01-01T00:00:00Z") for name in names
    ]
    return store


def _use_case(store, deleter, dry_run: bool = False):
    logger = MagicMock()
    audit_logger = MagicMock()
    use_case = CleanupWorkspacesUseCase(
        report_store=store,
        workspace_deleter=deleter,
        logger=logger,
        audit_logger=audit_logger,
        dry_run=dry_run,
    )
    return use_case, logger, audit_logger


def test_run_continues_after_a_failed_deletion() -> None:
    """A failure for B must not stop A and C from being processed."""
    store = _report_store(["A", "B", "C"])
    deleter = MagicMock()
    deleter.delete_workspace.side_effect = [
        WorkspaceDeletionResult(success=True),
        WorkspaceDeletionResult(success=False, error="workspace locked\n"),
        WorkspaceDeletionResult(success=True),
    ]
    use_case, logger, audit_logger = _use_case(store, deleter)

    summary = use_case.run(Path("report.csv"))

    store.read_report.assert_called_once_with(Path("report.csv"))
    assert deleter.delete_workspace.call_args_list == [
        call("A"),
        call("B"),
        call("C"),
    ]
    assert summary.outcomes == (
        WorkspaceCleanupOutcome("A", STATUS_DELETED),
        WorkspaceCleanupOutcome("B", STATUS_FAILED, "workspace locked"),
        WorkspaceCleanupOutcome("C", STATUS_DELETED),
    )
    logger.info.assert_any_call("Successfully deleted workspace for A")
    logger.info.assert_any_call("Successfully deleted workspace for C")
    logger.error.assert_called_once_with(
        "Failed to delete workspace for B: workspace locked"
    )
    audit_logger.error.assert_called_once_with(
        "failed workspace=B error=workspace locked"
    )


def test_run_skips_rows_with_empty_names() -> None:
    store = _report_store(["", "A"])
    deleter = MagicMock()
    deleter.delete_workspace.return_value = WorkspaceDeletionResult(True)
    use_case, logger, _ = _use_case(store, deleter)

    summary = use_case.run(Path("report.csv"))

    deleter.delete_workspace.assert_called_once_with("A")
    assert summary.skipped_count == 1
    assert summary.deleted_count == 1
    logger.warning.assert_called_once()


def test_dry_run_never_calls_the_deleter() -> None:
    store = _report_store(["A", "B"])
    deleter = MagicMock()
    use_case, _, audit_logger = _use_case(store, deleter, dry_run=True)

    summary = use_case.run(Path("report.csv"))

    deleter.delete_workspace.assert_not_called()
    audit_logger.info.assert_not_called()
    assert [o.status for o in summary.outcomes] == [STATUS_SKIPPED] * 2


def test_invalid_report_aborts_before_any_deletion() -> None:
    store = MagicMock()
    store.read_report.side_effect = ReportFormatError("bad header")
    deleter = MagicMock()
    use_case, _, _ = _use_case(store, deleter)

    with pytest.raises(ReportFormatError):
        use_case.run(Path("report.csv"))

    deleter.delete_workspace.assert_not_called()


def test_duplicate_rows_are_each_attempted() -> None:
    store = _report_store(["A", "A"])
    deleter = MagicMock()
    deleter.delete_workspace.side_effect = [
        WorkspaceDeletionResult(True),
        WorkspaceDeletionResult(False, "Workspace \"A\" doesn't exist."),
    ]
    use_case, _, _ = _use_case(store, deleter)

    summary = use_case.run(Path("report.csv"))

    assert deleter.delete_workspace.call_count == 2
    assert summary.deleted_count == 1
    assert summary.failed_count == 1
