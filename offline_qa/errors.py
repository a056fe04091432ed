"""offline_qa.errors

Central error types to keep error handling consistent.
"""


class AppError(Exception):
    """Base application error."""


class ConfigError(AppError):
    """Raised when scoring configuration is missing or invalid."""


class BankLoadError(AppError):
    """Raised when the QA bank dataset cannot be read or is inconsistent."""


class InvalidEntryError(BankLoadError):
    """Raised when a dataset record violates the QA entry field contract."""
