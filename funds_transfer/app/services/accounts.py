from __future__ import annotations

from ..models import AccountState
from .store import AccountStore


class AccountService:
    """Read-only view of account state."""

    def __init__(self, store: AccountStore) -> None:
        self.store = store

    def get_account(self, account_id: int) -> AccountState:
        account = self.store.get(account_id)
        return AccountState(id=account.id, balance=account.balance)
