"""Domain models describing workspace cleanup outcomes."""

from dataclasses import dataclass, field

STATUS_DELETED = "deleted"
STATUS_FAILED = "failed"
STATUS_SKIPPED = "skipped"


@dataclass(frozen=True)
class WorkspaceDeletionResult:
    """Result of a single external workspace deletion."""

    success: bool
    error: str = ""


@dataclass(frozen=True)
class WorkspaceCleanupOutcome:
    """Outcome recorded for one report row during cleanup."""

    name: str
    status: str
    error: str = ""


@dataclass(frozen=True)
class CleanupSummary:
    """Aggregated outcomes of a cleanup run, in report order."""

    outcomes: tuple[WorkspaceCleanupOutcome, ...] = field(default_factory=tuple)

    @property
    def deleted_count(self) -> int:
        return self._count(STATUS_DELETED)

    @property
    def failed_count(self) -> int:
        return self._count(STATUS_FAILED)

    @property
    def skipped_count(self) -> int:
        return self._count(STATUS_SKIPPED)

    def _count(self, status: str) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)


__all__ = [
    "STATUS_DELETED",
    "STATUS_FAILED",
    "STATUS_SKIPPED",
    "WorkspaceDeletionResult",
    "WorkspaceCleanupOutcome",
    "CleanupSummary",
]
