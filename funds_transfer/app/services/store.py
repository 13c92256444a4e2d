from __future__ import annotations

import logging
import threading
from contextlib import ExitStack
from dataclasses import dataclass, field
from decimal import Decimal, Inexact, localcontext
from typing import Dict, Iterable, List, Mapping, Tuple

from ..core.errors import (
    AccountNotFoundError,
    InsufficientFundsError,
    NonPositiveAmountError,
)
from ..models.schemas import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Account:
    id: int
    balance: Decimal


@dataclass
class _AccountRecord:
    id: int
    balance: Decimal
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def to_account(self) -> Account:
        return Account(id=self.id, balance=self.balance)


class AccountStore:
    """In-memory owner of every account balance.

    The set of account ids is fixed once the store is built, so the id map is
    read without synchronization. Each account carries its own lock; a
    transfer holds the locks of both accounts involved, always taken in
    ascending id order, for the duration of the balance check and update.
    """

    def __init__(self, accounts: Iterable[Account] = ()) -> None:
        self._accounts: Dict[int, _AccountRecord] = {}
        for account in accounts:
            _check_seed(account.id, account.balance)
            if account.id in self._accounts:
                raise ValueError(f"Duplicate account id {account.id}")
            self._accounts[account.id] = _AccountRecord(
                id=account.id, balance=account.balance
            )

    @classmethod
    def from_balances(cls, balances: Mapping[int, Decimal]) -> "AccountStore":
        store = cls(
            Account(id=account_id, balance=Decimal(str(balance)))
            for account_id, balance in balances.items()
        )
        logger.info("store.seeded", extra={"account_count": len(store)})
        return store

    def __len__(self) -> int:
        return len(self._accounts)

    def _get_record(self, account_id: int) -> _AccountRecord:
        try:
            return self._accounts[account_id]
        except KeyError as exc:
            raise AccountNotFoundError(account_id) from exc

    def get(self, account_id: int) -> Account:
        # Balances are replaced whole, never updated in place, so a single
        # account is read without taking its lock.
        return self._get_record(account_id).to_account()

    def snapshot(self) -> List[Account]:
        """Return a consistent copy of every account, ordered by id."""
        records = [self._accounts[account_id] for account_id in sorted(self._accounts)]
        with ExitStack() as stack:
            for record in records:
                stack.enter_context(record.lock)
            return [record.to_account() for record in records]

    def apply_transfer(
        self, from_id: int, to_id: int, amount: Decimal
    ) -> Tuple[Account, Account]:
        """Move ``amount`` from ``from_id`` to ``to_id`` as one step.

        The source is looked up before the destination, so when both are
        unknown the source id is the one reported. Nothing is mutated unless
        every check passes. The new balances are computed with inexact
        results trapped, so a transfer is either applied exactly or refused.
        """
        if not Decimal(amount).is_finite() or amount <= 0:
            raise NonPositiveAmountError()

        source = self._get_record(from_id)
        dest = self._get_record(to_id)

        ordered = sorted({source.id: source, dest.id: dest}.items())
        with ExitStack() as stack:
            for _, record in ordered:
                stack.enter_context(record.lock)

            if source.balance < amount:
                raise InsufficientFundsError()

            with localcontext() as ctx:
                ctx.traps[Inexact] = True
                try:
                    debited = source.balance - amount
                    credited = (debited if dest is source else dest.balance) + amount
                except Inexact as exc:
                    raise ValueError("Transfer amount exceeds supported precision") from exc

            source.balance = debited
            dest.balance = credited
            return source.to_account(), dest.to_account()


def _check_seed(account_id: int, balance: Decimal) -> None:
    if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
        raise ValueError(f"Account id must be a positive integer, got {account_id!r}")
    if not isinstance(balance, Decimal) or not balance.is_finite():
        raise ValueError(f"Balance of account {account_id} must be a finite Decimal")
    if balance < 0:
        raise ValueError(f"Balance of account {account_id} cannot be negative")
    _, digits, exponent = balance.as_tuple()
    if exponent < -MONEY_DECIMAL_PLACES:
        raise ValueError(
            f"Balance of account {account_id} has more than {MONEY_DECIMAL_PLACES} decimal places"
        )
    if len(digits) + exponent > MONEY_MAX_DIGITS - MONEY_DECIMAL_PLACES:
        raise ValueError(f"Balance of account {account_id} is too large")
