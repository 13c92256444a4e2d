from fastapi import APIRouter, Depends

from ..core.dependencies import get_account_service, get_transfer_service
from ..models import AccountState, TransferOutcome, TransferRequest
from ..services import AccountService, TransferService


router = APIRouter(prefix="/account", tags=["accounts"])

@router.get("/{account_id}", response_model=AccountState)
def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
) -> AccountState:
    return service.get_account(account_id)

transfer_router = APIRouter(prefix="/transfer", tags=["transfers"])

@transfer_router.post("", response_model=TransferOutcome)
def create_transfer(
    payload: TransferRequest,
    service: TransferService = Depends(get_transfer_service),
) -> TransferOutcome:
    return service.transfer(payload)

__all__ = ["router", "transfer_router"]
