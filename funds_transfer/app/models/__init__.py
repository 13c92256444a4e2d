from .schemas import (
    AccountState,
    ErrorResponse,
    TransferOutcome,
    TransferRequest,
)

__all__ = [
    "AccountState",
    "ErrorResponse",
    "TransferOutcome",
    "TransferRequest",
]
