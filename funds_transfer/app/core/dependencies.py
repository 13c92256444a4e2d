from fastapi import Depends, Request

from ..services import AccountService, AccountStore, TransferService


def get_account_store(request: Request) -> AccountStore:
    return request.app.state.account_store


def get_account_service(store: AccountStore = Depends(get_account_store)) -> AccountService:
    return AccountService(store)


def get_transfer_service(store: AccountStore = Depends(get_account_store)) -> TransferService:
    return TransferService(store)
