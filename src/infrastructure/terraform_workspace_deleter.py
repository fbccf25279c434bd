"""Infrastructure adapter deleting workspaces through the terraform CLI."""

import subprocess

from src.application.ports.workspace_deleter import WorkspaceDeleterPort
from src.domain.models.cleanup import WorkspaceDeletionResult


class TerraformCliWorkspaceDeleter(WorkspaceDeleterPort):
    """Run ``terraform workspace delete <name>`` for each target."""

    def __init__(
        self,
        terraform_bin: str = "terraform",
        timeout: float | None = None,
    ) -> None:
        """Initialize the deleter.

        Args:
            terraform_bin: Executable name or path.
            timeout: Optional per-command timeout in seconds.
        """
        self._terraform_bin = terraform_bin
        self._timeout = timeout

    def build_command(self, name: str) -> list[str]:
        return [self._terraform_bin, "workspace", "delete", name]

    def delete_workspace(self, name: str) -> WorkspaceDeletionResult:
        """Delete one workspace, never raising for command failures.

        Args:
            name: Workspace to delete.

        Returns:
            WorkspaceDeletionResult: Success flag and captured stderr text.
        """
        command = self.build_command(name)
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            return WorkspaceDeletionResult(
                success=False,
                error=f"timed out after {self._timeout} seconds",
            )
        except OSError as exc:
            return WorkspaceDeletionResult(
                success=False,
                error=f"could not run {self._terraform_bin}: {exc}",
            )

        if completed.returncode == 0:
            return WorkspaceDeletionResult(success=True)
        error = (completed.stderr or "").strip()
        if not error:
            error = f"exit status {completed.returncode}"
        return WorkspaceDeletionResult(success=False, error=error)


__all__ = ["TerraformCliWorkspaceDeleter"]
