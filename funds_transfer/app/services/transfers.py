from __future__ import annotations

import logging

from ..core.errors import TransferError
from ..models import TransferOutcome, TransferRequest
from .store import AccountStore
from .validation import validate_transfer


logger = logging.getLogger(__name__)


class TransferService:
    def __init__(self, store: AccountStore) -> None:
        self.store = store

    def transfer(self, payload: TransferRequest) -> TransferOutcome:
        """Validate ``payload`` and move the funds, or raise without side effects.

        Validation failures are raised before the store is consulted. Lookup
        and balance failures come from the store, which checks the source
        account before the destination and mutates nothing on failure.
        """
        try:
            validate_transfer(payload)
            source, dest = self.store.apply_transfer(
                payload.source_account_id,
                payload.dest_account_id,
                payload.amount,
            )
        except TransferError as exc:
            logger.info(
                "transfer.rejected",
                extra={
                    "source_account_id": payload.source_account_id,
                    "dest_account_id": payload.dest_account_id,
                    "amount": str(payload.amount),
                    "kind": exc.kind.value,
                },
            )
            raise

        logger.info(
            "transfer.completed",
            extra={
                "source_account_id": source.id,
                "dest_account_id": dest.id,
                "amount": str(payload.amount),
                "source_balance": str(source.balance),
                "dest_balance": str(dest.balance),
            },
        )
        return TransferOutcome()
