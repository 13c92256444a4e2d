from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_AMOUNT = "MissingAmount"
    MISSING_SOURCE = "MissingSource"
    MISSING_DESTINATION = "MissingDestination"
    SELF_TRANSFER = "SelfTransfer"
    NON_POSITIVE_AMOUNT = "NonPositiveAmount"
    ACCOUNT_NOT_FOUND = "AccountNotFound"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    MALFORMED_REQUEST = "MalformedRequest"


class TransferError(Exception):
    """Base class for every failure a transfer or account read can produce."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransferValidationError(TransferError):
    """Raised when a request is rejected before the store is touched."""


class MissingAmountError(TransferValidationError):
    kind = ErrorKind.MISSING_AMOUNT

    def __init__(self) -> None:
        super().__init__("amount cannot be empty")


class MissingSourceError(TransferValidationError):
    kind = ErrorKind.MISSING_SOURCE

    def __init__(self) -> None:
        super().__init__("source account cannot be empty")


class MissingDestinationError(TransferValidationError):
    kind = ErrorKind.MISSING_DESTINATION

    def __init__(self) -> None:
        super().__init__("destination account cannot be empty")


class SelfTransferError(TransferValidationError):
    kind = ErrorKind.SELF_TRANSFER

    def __init__(self) -> None:
        super().__init__("Cannot transfer to self")


class NonPositiveAmountError(TransferValidationError):
    kind = ErrorKind.NON_POSITIVE_AMOUNT

    def __init__(self) -> None:
        super().__init__("transfer amount has to be positive")


class AccountNotFoundError(TransferError):
    """Raised when an account id is missing from the store."""

    kind = ErrorKind.ACCOUNT_NOT_FOUND

    def __init__(self, account_id: int) -> None:
        super().__init__(f"account {account_id} not found")
        self.account_id = account_id


class InsufficientFundsError(TransferError):
    """Raised when a transfer would drop the source balance below zero."""

    kind = ErrorKind.INSUFFICIENT_FUNDS

    def __init__(self) -> None:
        super().__init__("insufficient funds")
