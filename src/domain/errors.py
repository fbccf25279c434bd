"""Domain errors raised by the inactive accounts audit."""


class InactiveAccountsError(Exception):
    """Base class for fatal audit errors."""


class SettingsError(InactiveAccountsError):
    """Raised when required configuration is missing or invalid."""


class AccountsFetchError(InactiveAccountsError):
    """Raised when the remote accounts listing cannot be retrieved."""


class ReportWriteError(InactiveAccountsError):
    """Raised when the inactive accounts report cannot be written."""


class ReportFormatError(InactiveAccountsError):
    """Raised when a report file does not match the expected layout."""


__all__ = [
    "InactiveAccountsError",
    "SettingsError",
    "AccountsFetchError",
    "ReportWriteError",
    "ReportFormatError",
]
