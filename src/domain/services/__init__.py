"""Domain services package."""

from .inactivity import filter_inactive_accounts

__all__ = ["filter_inactive_accounts"]
