"""CSV-backed storage for the inactive accounts report."""

import csv
import os
from pathlib import Path
import tempfile

from src.application.ports.inactive_report import InactiveAccountsReportPort
from src.domain.constants import REPORT_HEADER
from src.domain.errors import ReportFormatError, ReportWriteError
from src.domain.models.accounts import OrganizationAccount


class CsvInactiveAccountsReport(InactiveAccountsReportPort):
    """Read and write ``Name,Last Activity`` UTF-8 CSV reports."""

    def write_report(
        self,
        accounts: list[OrganizationAccount],
        path: Path,
    ) -> Path:
        """Write the report, replacing any existing file atomically.

        Rows are written to a temporary file in the destination directory
        which replaces ``path`` only once it is complete and closed.

        Args:
            accounts: Accounts to persist, in discovery order.
            path: Destination file.

        Returns:
            Path: The destination path.

        Raises:
            ReportWriteError: If the file cannot be created or written.
        """
        path = Path(path)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                writer = csv.writer(handle)
                writer.writerow(REPORT_HEADER)
                for account in accounts:
                    writer.writerow(
                        [account.name or "", account.last_activity_at or ""]
                    )
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ReportWriteError(
                f"Could not write report to {path}: {exc}"
            ) from exc
        return path

    def read_report(self, path: Path) -> list[OrganizationAccount]:
        """Load a report, validating its header and column layout.

        Blank lines are ignored. The whole file is validated before any
        account is returned.

        Args:
            path: Report file to read.

        Returns:
            list[OrganizationAccount]: Accounts in file order.

        Raises:
            ReportFormatError: If the file is missing, empty, has a different
                header, or contains a row without exactly two columns.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8-sig", newline="") as handle:
                rows = list(csv.reader(handle))
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise ReportFormatError(f"Could not read report {path}: {exc}") from exc

        rows = [row for row in rows if row]
        if not rows:
            raise ReportFormatError(f"Report {path} is empty")

        header = tuple(cell.strip() for cell in rows[0])
        if header != REPORT_HEADER:
            raise ReportFormatError(
                f"Report {path} has header {list(rows[0])!r}, "
                f"expected {list(REPORT_HEADER)!r}"
            )

        accounts = []
        for index, row in enumerate(rows[1:], start=1):
            if len(row) != len(REPORT_HEADER):
                raise ReportFormatError(
                    f"Report {path} data row {index} has {len(row)} columns, "
                    f"expected {len(REPORT_HEADER)}"
                )
            name, last_activity = row
            accounts.append(
                OrganizationAccount(
                    name=name,
                    last_activity_at=last_activity or None,
                )
            )
        return accounts


__all__ = ["CsvInactiveAccountsReport"]
