from __future__ import annotations
from .constants import ENCODED_ACCOUNT_LEN


class BadAccountId(ValueError):
    """Text that does not decode to an account ID. Carries a diagnostic reason."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid account ID ({self.reason})"


class MalformedAccountId(BadAccountId):
    pass


class WrongAccountIdLength(BadAccountId):

    def __init__(self, actual: int, expected: int = ENCODED_ACCOUNT_LEN):
        super().__init__(f"Expected {expected} bytes in account ID but found {actual}")
        self.expected = expected
        self.actual = actual


class AccountIdChecksumMismatch(BadAccountId):

    def __init__(self, reason: str = "Invalid hash in account ID"):
        super().__init__(reason)
