"""CLI adapter auditing inactive Terraform organizations.

This module wires the audit use case to the Terraform Cloud API and the CSV
report, prints what it found, and hands over to the cleanup phase once the
operator confirms.
"""

import argparse
from pathlib import Path

from src.adapters.cleanup_workspaces_cli import (
    add_confirmation_arguments,
    ask_for_confirmation,
    run_cleanup,
)
from src.application.use_cases.audit_inactive_accounts import (
    AuditInactiveAccountsUseCase,
)
from src.domain.errors import InactiveAccountsError
from src.infrastructure.container import (
    build_accounts_source,
    build_report_store,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AuditSettings


def main(argv: list[str] | None = None) -> int:
    """Run the audit, then optionally delete the inactive workspaces."""
    parser = argparse.ArgumentParser(
        description="Find Terraform organizations inactive beyond the retention window.",
    )
    add_confirmation_arguments(parser)
    ns = parser.parse_args(argv)

    logger = get_app_logger()
    try:
        settings = AuditSettings.from_env()
        report_path = (
            Path(ns.report_path) if ns.report_path else settings.report_path
        )
        use_case = AuditInactiveAccountsUseCase(
            accounts_source=build_accounts_source(settings),
            report_store=build_report_store(),
            retention_days=settings.retention_days,
            logger=logger,
        )
        audit = use_case.run(report_path)
    except InactiveAccountsError as exc:
        logger.error(str(exc))
        print(f"Error: {exc}")
        return 1

    print(f"Fetched {audit.fetched_count} accounts:")
    for account in audit.accounts:
        print(f"  {account.name}")

    print(
        f"Accounts older than {settings.retention_days} days "
        "with no activity:"
    )
    for account in audit.inactive_accounts:
        print(f"  {account.name}")

    print(f"CSV file '{audit.report_path}' has been created.")

    if not ask_for_confirmation(ns.preset_answer):
        print("Cleanup skipped.")
        return 0

    print("Proceeding with Terraform Enterprise Account cleanup...")
    return run_cleanup(
        audit.report_path,
        settings,
        logger,
        dry_run=ns.dry_run,
    )


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
