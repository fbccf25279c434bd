"""Infrastructure adapter listing organizations from Terraform Cloud."""

from typing import Any

import requests

from src.application.ports.accounts_source import AccountsSourcePort
from src.domain.errors import AccountsFetchError
from src.domain.models.accounts import OrganizationAccount
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_ORGANIZATIONS_URL,
)


class TerraformAccountsSource(AccountsSourcePort):
    """Account source backed by the Terraform Cloud organizations API."""

    def __init__(
        self,
        api_token: str,
        url: str = DEFAULT_ORGANIZATIONS_URL,
        timeout: float | None = DEFAULT_HTTP_TIMEOUT,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the source adapter.

        Args:
            api_token: Bearer token presented on the request.
            url: Organizations listing endpoint.
            timeout: Request timeout in seconds, None to wait forever.
            session: Optional preconfigured requests session.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {api_token}",
                "Content-Type": "application/vnd.api+json",
            }
        )
        self._logger = logger or get_app_logger()

    def fetch_accounts(self) -> list[OrganizationAccount]:
        """Return every organization listed by the endpoint.

        Returns:
            list[OrganizationAccount]: Accounts in the order returned.

        Raises:
            AccountsFetchError: On transport errors, non-2xx responses, or a
                body that is not shaped like ``{"data": [...]}``.
        """
        try:
            response = self._session.get(self._url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise AccountsFetchError(
                f"Failed to list organizations from {self._url}: {exc}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise AccountsFetchError(
                f"Organizations response from {self._url} is not valid JSON"
            ) from exc

        records = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(records, list):
            raise AccountsFetchError(
                "Organizations response is missing a 'data' list"
            )

        accounts = [self._to_account(record) for record in records]
        self._logger.debug(f"Parsed {len(accounts)} organizations")
        return accounts

    @staticmethod
    def _to_account(record: Any) -> OrganizationAccount:
        """Convert one JSON:API record, tolerating missing fields.

        Args:
            record: Raw element of the ``data`` list.

        Returns:
            OrganizationAccount: Account with an empty name and no timestamp
            when the corresponding attributes are absent.
        """
        attributes = record.get("attributes") if isinstance(record, dict) else None
        if not isinstance(attributes, dict):
            attributes = {}
        name = attributes.get("name")
        last_activity = attributes.get("last-activity-at")
        return OrganizationAccount(
            name=name if isinstance(name, str) else "",
            last_activity_at=(
                last_activity if isinstance(last_activity, str) else None
            ),
        )


__all__ = ["TerraformAccountsSource"]
