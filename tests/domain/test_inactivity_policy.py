"""Tests for the inactivity policies."""

from datetime import datetime, timedelta, timezone

import pytest

from src.domain.policies.inactivity import (
    compute_cutoff,
    is_inactive,
    parse_activity_timestamp,
)


NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_parse_activity_timestamp_accepts_rfc3339_variants() -> None:
    """Zulu and numeric offsets, with or without fractions, should parse."""
    assert parse_activity_timestamp("2020-01-01T00:00:00Z") == datetime(
        2020, 1, 1, tzinfo=timezone.utc
    )
    assert parse_activity_timestamp("2020-01-01T00:00:00.123Z") is not None
    parsed = parse_activity_timestamp("2020-01-01T02:00:00+02:00")
    assert parsed == datetime(2020, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "   ",
        "not-a-date",
        "2020-13-45T00:00:00Z",
        "2020-01-01",
        42,
        "20200101T000000Z",
        "2020-01-01T00Z",
        "2020-01-01T00:00Z",
        "2020-W01-1T00:00:00+00:00",
        "2020-01-01T00:00:00+0000",
        "2020-01-01T00:00:00.Z",
    ],
)
def test_parse_activity_timestamp_rejects_invalid_values(value) -> None:
    """Missing, malformed, or offset-less values should not parse."""
    assert parse_activity_timestamp(value) is None


def test_parse_activity_timestamp_rejects_naive_datetime() -> None:
    """RFC 3339 requires an offset, so naive timestamps are rejected."""
    assert parse_activity_timestamp("2020-01-01T00:00:00") is None


def test_compute_cutoff_subtracts_retention_window() -> None:
    """The cutoff should be exactly retention_days before now."""
    assert compute_cutoff(NOW) == NOW - timedelta(days=90)
    assert compute_cutoff(NOW, retention_days=7) == NOW - timedelta(days=7)


def test_compute_cutoff_requires_aware_now() -> None:
    """A naive reference time is a programming error."""
    with pytest.raises(ValueError):
        compute_cutoff(datetime(2024, 1, 1))


def test_compute_cutoff_rejects_negative_window() -> None:
    with pytest.raises(ValueError):
        compute_cutoff(NOW, retention_days=-1)


def test_is_inactive_uses_strict_comparison() -> None:
    """A timestamp exactly at the cutoff is not inactive."""
    cutoff = compute_cutoff(NOW)
    at_cutoff = cutoff.isoformat()
    just_before = (cutoff - timedelta(seconds=1)).isoformat()
    just_after = (cutoff + timedelta(seconds=1)).isoformat()

    assert is_inactive(at_cutoff, cutoff) is False
    assert is_inactive(just_before, cutoff) is True
    assert is_inactive(just_after, cutoff) is False


def test_is_inactive_is_false_for_unparseable_values() -> None:
    cutoff = compute_cutoff(NOW)
    assert is_inactive(None, cutoff) is False
    assert is_inactive("yesterday", cutoff) is False


@pytest.mark.parametrize(
    ("value", "expected_micros"),
    [
        ("2020-01-01T00:00:00.1Z", 100000),
        ("2020-01-01T00:00:00.12Z", 120000),
        ("2020-01-01T00:00:00.123456789Z", 123456),
        ("2020-01-01t00:00:00.5z", 500000),
        ("2020-01-01 00:00:00.000001+00:00", 1),
    ],
)
def test_parse_activity_timestamp_normalizes_fractions(
    value: str,
    expected_micros: int,
) -> None:
    """Any RFC 3339 fraction length parses, truncated to microseconds."""
    parsed = parse_activity_timestamp(value)

    assert parsed is not None
    assert parsed.microsecond == expected_micros
    assert parsed.utcoffset() == timedelta(0)


def test_non_rfc3339_forms_never_count_as_inactive() -> None:
    """ISO variants outside RFC 3339 must not become deletion targets."""
    cutoff = compute_cutoff(NOW)

    assert is_inactive("20200101T000000Z", cutoff) is False
    assert is_inactive("2020-W01-1T00:00:00+00:00", cutoff) is False
