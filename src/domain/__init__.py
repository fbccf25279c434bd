"""Domain package for business rules and core models."""

from .constants import (
    AFFIRMATIVE_ANSWER,
    DEFAULT_RETENTION_DAYS,
    REPORT_HEADER,
)
from .errors import (
    AccountsFetchError,
    InactiveAccountsError,
    ReportFormatError,
    ReportWriteError,
    SettingsError,
)
from .models import (
    CleanupSummary,
    OrganizationAccount,
    WorkspaceCleanupOutcome,
    WorkspaceDeletionResult,
)
from .policies import compute_cutoff, is_inactive, parse_activity_timestamp
from .services import filter_inactive_accounts

__all__ = [
    "AFFIRMATIVE_ANSWER",
    "DEFAULT_RETENTION_DAYS",
    "REPORT_HEADER",
    "AccountsFetchError",
    "InactiveAccountsError",
    "ReportFormatError",
    "ReportWriteError",
    "SettingsError",
    "CleanupSummary",
    "OrganizationAccount",
    "WorkspaceCleanupOutcome",
    "WorkspaceDeletionResult",
    "compute_cutoff",
    "is_inactive",
    "parse_activity_timestamp",
    "filter_inactive_accounts",
]
