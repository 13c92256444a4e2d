from __future__ import annotations

from ..core.errors import (
    MissingAmountError,
    MissingDestinationError,
    MissingSourceError,
    NonPositiveAmountError,
    SelfTransferError,
)
from ..models import TransferRequest


def validate_transfer(payload: TransferRequest) -> None:
    """Reject a malformed transfer request.

    Rules are checked in a fixed order and the first failing rule is raised,
    so a request with several problems always reports the same one.
    """
    if payload.amount is None:
        raise MissingAmountError()
    if payload.source_account_id is None:
        raise MissingSourceError()
    if payload.dest_account_id is None:
        raise MissingDestinationError()
    if payload.source_account_id == payload.dest_account_id:
        raise SelfTransferError()
    if not payload.amount.is_finite() or payload.amount <= 0:
        raise NonPositiveAmountError()
