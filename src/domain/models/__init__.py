"""Domain models package."""

from .accounts import OrganizationAccount
from .cleanup import (
    STATUS_DELETED,
    STATUS_FAILED,
    STATUS_SKIPPED,
    CleanupSummary,
    WorkspaceCleanupOutcome,
    WorkspaceDeletionResult,
)

__all__ = [
    "OrganizationAccount",
    "STATUS_DELETED",
    "STATUS_FAILED",
    "STATUS_SKIPPED",
    "CleanupSummary",
    "WorkspaceCleanupOutcome",
    "WorkspaceDeletionResult",
]
