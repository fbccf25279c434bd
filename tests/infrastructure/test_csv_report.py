"""Tests for the CsvInactiveAccountsReport adapter."""

import csv
from pathlib import Path

import pytest

from src.domain.errors import ReportFormatError, ReportWriteError
from src.domain.models.accounts import OrganizationAccount
from src.infrastructure.csv_report import CsvInactiveAccountsReport


def test_write_report_produces_header_and_one_row_per_account(
    tmp_path: Path,
) -> None:
    path = tmp_path / "report.csv"
    accounts = [
        OrganizationAccount("acme", "2020-01-01T00:00:00Z"),
        OrganizationAccount("", "2019-06-30T12:00:00+02:00"),
        OrganizationAccount("comma, inc", "2021-02-03T04:05:06Z"),
    ]

    written = CsvInactiveAccountsReport().write_report(accounts, path)

    assert written == path
    with path.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.reader(handle))
    assert rows == [
        ["Name", "Last Activity"],
        ["acme", "2020-01-01T00:00:00Z"],
        ["", "2019-06-30T12:00:00+02:00"],
        ["comma, inc", "2021-02-03T04:05:06Z"],
    ]
    assert list(tmp_path.iterdir()) == [path]


def test_write_report_overwrites_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "report.csv"
    path.write_text("stale\ncontent\nhere\n", encoding="utf-8")

    CsvInactiveAccountsReport().write_report([], path)

    assert path.read_text(encoding="utf-8").splitlines() == [
        "Name,Last Activity"
    ]


def test_write_report_raises_when_destination_is_unwritable(
    tmp_path: Path,
) -> None:
    path = tmp_path / "missing-dir" / "report.csv"

    with pytest.raises(ReportWriteError):
        CsvInactiveAccountsReport().write_report([], path)

    assert not path.exists()


def test_read_report_returns_rows_after_header(tmp_path: Path) -> None:
    path = tmp_path / "report.csv"
    path.write_text(
        "Name,Last Activity\r\nacme,2020-01-01T00:00:00Z\r\n\r\n,\r\n",
        encoding="utf-8",
    )

    accounts = CsvInactiveAccountsReport().read_report(path)

    assert accounts == [
        OrganizationAccount("acme", "2020-01-01T00:00:00Z"),
        OrganizationAccount("", None),
    ]


def test_read_report_accepts_byte_order_mark(tmp_path: Path) -> None:
    """Spreadsheet editors often save the report with a UTF-8 BOM."""
    path = tmp_path / "edited.csv"
    path.write_text(
        "﻿Name,Last Activity\nacme,2020-01-01T00:00:00Z\n",
        encoding="utf-8",
    )

    accounts = CsvInactiveAccountsReport().read_report(path)

    assert accounts == [OrganizationAccount("acme", "2020-01-01T00:00:00Z")]


def test_read_report_reads_back_what_was_written(tmp_path: Path) -> None:
    store = CsvInactiveAccountsReport()
    path = tmp_path / "report.csv"
    accounts = [
        OrganizationAccount("acme", "2020-01-01T00:00:00Z"),
        OrganizationAccount("acme", "2020-01-01T00:00:00Z"),
    ]

    store.write_report(accounts, path)

    assert store.read_report(path) == accounts


@pytest.mark.parametrize(
    "content",
    [
        "",
        "\n\n",
        "acme,2020-01-01T00:00:00Z\n",
        "Name\nacme\n",
        "Organization,Last Activity\nacme,2020-01-01T00:00:00Z\n",
    ],
)
def test_read_report_rejects_missing_or_wrong_header(
    tmp_path: Path,
    content: str,
) -> None:
    path = tmp_path / "report.csv"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ReportFormatError):
        CsvInactiveAccountsReport().read_report(path)


def test_read_report_rejects_rows_with_wrong_column_count(
    tmp_path: Path,
) -> None:
    path = tmp_path / "report.csv"
    path.write_text(
        "Name,Last Activity\nacme,2020-01-01T00:00:00Z\nglobex\n",
        encoding="utf-8",
    )

    with pytest.raises(ReportFormatError, match="data row 2"):
        CsvInactiveAccountsReport().read_report(path)


def test_read_report_raises_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ReportFormatError):
        CsvInactiveAccountsReport().read_report(tmp_path / "absent.csv")
