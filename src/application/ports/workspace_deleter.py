"""Port for deleting remote workspaces."""

from typing import Protocol

from src.domain.models.cleanup import WorkspaceDeletionResult


class WorkspaceDeleterPort(Protocol):
    """Port exposing a destructive, per-workspace delete operation."""

    def delete_workspace(self, name: str) -> WorkspaceDeletionResult:
        """Delete the named workspace and report how it went."""


__all__ = ["WorkspaceDeleterPort"]
