"""Composition root for wiring infrastructure adapters."""

from src.application.ports.accounts_source import AccountsSourcePort
from src.application.ports.inactive_report import InactiveAccountsReportPort
from src.application.ports.workspace_deleter import WorkspaceDeleterPort
from src.infrastructure.csv_report import CsvInactiveAccountsReport
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AuditSettings
from src.infrastructure.terraform_accounts_source import (
    TerraformAccountsSource,
)
from src.infrastructure.terraform_workspace_deleter import (
    TerraformCliWorkspaceDeleter,
)


def build_accounts_source(settings: AuditSettings) -> AccountsSourcePort:
    """Return the remote organizations source."""
    return TerraformAccountsSource(
        api_token=settings.api_token,
        url=settings.organizations_url,
        timeout=settings.http_timeout,
        logger=get_app_logger(),
    )


def build_report_store() -> InactiveAccountsReportPort:
    """Return the CSV report store."""
    return CsvInactiveAccountsReport()


def build_workspace_deleter(settings: AuditSettings) -> WorkspaceDeleterPort:
    """Return the terraform CLI workspace deleter."""
    return TerraformCliWorkspaceDeleter(
        terraform_bin=settings.terraform_bin,
        timeout=settings.delete_timeout,
    )


__all__ = [
    "build_accounts_source",
    "build_report_store",
    "build_workspace_deleter",
]
