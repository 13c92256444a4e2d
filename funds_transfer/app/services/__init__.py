from .accounts import AccountService
from .store import Account, AccountStore
from .transfers import TransferService
from .validation import validate_transfer

__all__ = [
    "Account",
    "AccountService",
    "AccountStore",
    "TransferService",
    "validate_transfer",
]
