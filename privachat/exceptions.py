# privachat/exceptions.py
"""
Errors raised by the ledger services and mapped to JSON responses in main.py
"""

from typing import Optional


class LedgerError(Exception):
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFound(LedgerError):
    status_code = 404


class ValidationError(LedgerError):
    """Rejected input. Raised before any storage access."""

    status_code = 400

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Invalid value for {field}")


class StorageUnavailable(LedgerError):
    """The database could not be reached or rejected the statement."""

    status_code = 500
