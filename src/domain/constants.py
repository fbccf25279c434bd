"""Domain constants for the inactive accounts audit."""

DEFAULT_RETENTION_DAYS = 90

REPORT_HEADER = ("Name", "Last Activity")

AFFIRMATIVE_ANSWER = "y"


__all__ = ["DEFAULT_RETENTION_DAYS", "REPORT_HEADER", "AFFIRMATIVE_ANSWER"]
