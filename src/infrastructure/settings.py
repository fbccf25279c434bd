"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from src.domain.constants import DEFAULT_RETENTION_DAYS
from src.domain.errors import SettingsError


DEFAULT_ORGANIZATIONS_URL = "https://app.terraform.io/api/v2/organizations"
DEFAULT_REPORT_PATH = "old_inactive_accounts.csv"
DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class AuditSettings:
    """Settings for the inactive accounts audit.

    Attributes:
        api_token: Bearer token presented to the remote service.
        organizations_url: Endpoint listing organizations.
        http_timeout: Request timeout in seconds.
        report_path: Location of the inactive accounts report.
        retention_days: Retention window in days.
        terraform_bin: Executable used to delete workspaces.
        delete_timeout: Optional per-deletion timeout in seconds.
    """

    api_token: str
    organizations_url: str = DEFAULT_ORGANIZATIONS_URL
    http_timeout: float | None = DEFAULT_HTTP_TIMEOUT
    report_path: Path = Path(DEFAULT_REPORT_PATH)
    retention_days: int = DEFAULT_RETENTION_DAYS
    terraform_bin: str = "terraform"
    delete_timeout: float | None = None

    @classmethod
    def from_env(cls, require_token: bool = True) -> "AuditSettings":
        """Build settings from environment variables.

        Args:
            require_token: When False, a missing TFE_TOKEN is accepted; used
                by the cleanup-only entry point which never calls the API.

        Returns:
            AuditSettings: Settings sourced from environment variables.

        Raises:
            SettingsError: If TFE_TOKEN is missing or a value is invalid.
        """
        dotenv.load_dotenv()
        token = os.getenv("TFE_TOKEN", "").strip()
        if require_token and not token:
            raise SettingsError("TFE_TOKEN not set in environment")

        return cls(
            api_token=token,
            organizations_url=(
                os.getenv("TFE_API_URL", "").strip()
                or DEFAULT_ORGANIZATIONS_URL
            ),
            http_timeout=cls._read_seconds(
                "TFE_HTTP_TIMEOUT",
                DEFAULT_HTTP_TIMEOUT,
            ),
            report_path=Path(
                os.getenv("INACTIVE_REPORT_PATH", "").strip()
                or DEFAULT_REPORT_PATH
            ),
            retention_days=cls._read_retention_days(),
            terraform_bin=(
                os.getenv("TERRAFORM_BIN", "").strip() or "terraform"
            ),
            delete_timeout=cls._read_seconds("TERRAFORM_DELETE_TIMEOUT", None),
        )

    @staticmethod
    def _read_seconds(name: str, default: float | None) -> float | None:
        """Read a positive number of seconds from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or empty.

        Returns:
            float | None: Parsed timeout or the default.
        """
        raw = os.getenv(name, "").strip()
        if not raw:
            return default
        try:
            value = float(raw)
        except ValueError as exc:
            raise SettingsError(f"{name} must be a number, got {raw!r}") from exc
        if value <= 0:
            raise SettingsError(f"{name} must be positive, got {raw!r}")
        return value

    @staticmethod
    def _read_retention_days() -> int:
        raw = os.getenv("INACTIVE_RETENTION_DAYS", "").strip()
        if not raw:
            return DEFAULT_RETENTION_DAYS
        try:
            value = int(raw)
        except ValueError as exc:
            raise SettingsError(
                f"INACTIVE_RETENTION_DAYS must be an integer, got {raw!r}"
            ) from exc
        if value < 0:
            raise SettingsError(
                f"INACTIVE_RETENTION_DAYS must not be negative, got {raw!r}"
            )
        return value


__all__ = [
    "AuditSettings",
    "DEFAULT_ORGANIZATIONS_URL",
    "DEFAULT_REPORT_PATH",
    "DEFAULT_HTTP_TIMEOUT",
]
