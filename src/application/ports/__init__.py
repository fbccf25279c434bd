"""Application ports package."""

from .accounts_source import AccountsSourcePort
from .inactive_report import InactiveAccountsReportPort
from .workspace_deleter import WorkspaceDeleterPort

__all__ = [
    "AccountsSourcePort",
    "InactiveAccountsReportPort",
    "WorkspaceDeleterPort",
]
