"""Domain service selecting inactive organizations."""

from collections.abc import Iterable
from datetime import datetime

from src.domain.models.accounts import OrganizationAccount
from src.domain.policies.inactivity import is_inactive


def filter_inactive_accounts(
    accounts: Iterable[OrganizationAccount],
    cutoff: datetime,
) -> list[OrganizationAccount]:
    """Return accounts whose last activity is strictly older than cutoff.

    Accounts with a missing or unparseable timestamp are dropped. Input order
    and duplicates are preserved.

    Args:
        accounts: Snapshot of accounts fetched from the remote service.
        cutoff: Timezone-aware cutoff instant.

    Returns:
        list[OrganizationAccount]: Inactive accounts in input order.
    """
    return [
        account
        for account in accounts
        if is_inactive(account.last_activity_at, cutoff)
    ]


__all__ = ["filter_inactive_accounts"]
