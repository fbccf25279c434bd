"""Application use cases package."""

from .audit_inactive_accounts import (
    AuditInactiveAccountsUseCase,
    InactiveAccountsAudit,
)
from .cleanup_workspaces import CleanupWorkspacesUseCase
from .confirm_cleanup import ConfirmationGate, is_affirmative

__all__ = [
    "AuditInactiveAccountsUseCase",
    "InactiveAccountsAudit",
    "CleanupWorkspacesUseCase",
    "ConfirmationGate",
    "is_affirmative",
]
