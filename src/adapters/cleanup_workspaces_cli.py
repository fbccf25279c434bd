"""CLI adapter deleting workspaces listed in an existing report.

This entry point skips fetching entirely: it consumes a report produced by an
earlier audit run (possibly edited by hand) behind the same confirmation
prompt as the full audit.
"""

import argparse
from pathlib import Path

from src.application.use_cases.cleanup_workspaces import (
    CleanupWorkspacesUseCase,
)
from src.application.use_cases.confirm_cleanup import ConfirmationGate
from src.domain.errors import InactiveAccountsError
from src.infrastructure.container import (
    build_report_store,
    build_workspace_deleter,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AuditSettings

CLEANUP_PROMPT = "Do you want to perform Terraform cleanup? (y/n): "


def add_confirmation_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the flags shared by every destructive entry point."""
    answer = parser.add_mutually_exclusive_group()
    answer.add_argument(
        "--yes",
        dest="preset_answer",
        action="store_true",
        default=None,
        help="Proceed with cleanup without prompting",
    )
    answer.add_argument(
        "--no",
        dest="preset_answer",
        action="store_false",
        help="Skip cleanup without prompting",
    )
    parser.set_defaults(preset_answer=None)
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the workspaces that would be deleted without deleting",
    )
    parser.add_argument(
        "--report-path",
        default=None,
        help="Report file (defaults to INACTIVE_REPORT_PATH)",
    )


def ask_for_confirmation(preset_answer: bool | None) -> bool:
    """Print the prompt and read the operator's decision."""
    print(CLEANUP_PROMPT, end="", flush=True)
    if preset_answer is not None:
        print("y" if preset_answer else "n")
    return ConfirmationGate(preset_answer=preset_answer).confirm()


def run_cleanup(
    report_path: Path,
    settings: AuditSettings,
    logger,
    dry_run: bool = False,
) -> int:
    """Run the cleanup use case and print its summary.

    Args:
        report_path: Report listing the workspaces to delete.
        settings: Settings used to build the workspace deleter.
        logger: Logger shared with the use case.
        dry_run: When True, nothing is deleted.

    Returns:
        int: 0 when the batch completed, 1 when the report was unusable.
    """
    use_case = CleanupWorkspacesUseCase(
        report_store=build_report_store(),
        workspace_deleter=build_workspace_deleter(settings),
        logger=logger,
        dry_run=dry_run,
    )
    try:
        summary = use_case.run(report_path)
    except InactiveAccountsError as exc:
        logger.error(str(exc))
        print(f"Cleanup aborted: {exc}")
        return 1

    print(
        f"Cleanup complete: {summary.deleted_count} deleted, "
        f"{summary.failed_count} failed, {summary.skipped_count} skipped."
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Delete the workspaces listed in an existing inactive accounts report."""
    parser = argparse.ArgumentParser(
        description="Delete Terraform workspaces listed in an inactive accounts report.",
    )
    add_confirmation_arguments(parser)
    ns = parser.parse_args(argv)

    logger = get_app_logger()
    try:
        settings = AuditSettings.from_env(require_token=False)
    except InactiveAccountsError as exc:
        logger.error(str(exc))
        print(f"Error: {exc}")
        return 1

    report_path = Path(ns.report_path) if ns.report_path else settings.report_path
    print(f"Using report {report_path}")

    if not ask_for_confirmation(ns.preset_answer):
        print("Cleanup skipped.")
        return 0

    print("Proceeding with Terraform Enterprise Account cleanup...")
    return run_cleanup(report_path, settings, logger, dry_run=ns.dry_run)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
