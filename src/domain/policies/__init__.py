"""Domain policies package."""

from .inactivity import compute_cutoff, is_inactive, parse_activity_timestamp

__all__ = ["compute_cutoff", "is_inactive", "parse_activity_timestamp"]
