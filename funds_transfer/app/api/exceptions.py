from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.errors import (
    AccountNotFoundError,
    ErrorKind,
    InsufficientFundsError,
    TransferValidationError,
)
from ..models import ErrorResponse


def _error_response(status_code: int, kind: str, message: str) -> JSONResponse:
    body = ErrorResponse(kind=kind, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "malformed request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"{location}: {first.get('msg', 'invalid value')}"
    return first.get("msg", "malformed request")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TransferValidationError)
    async def transfer_validation_handler(
        request: Request, exc: TransferValidationError
    ) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.kind.value, exc.message)

    @app.exception_handler(AccountNotFoundError)
    async def account_not_found_handler(
        request: Request, exc: AccountNotFoundError
    ) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, exc.kind.value, exc.message)

    @app.exception_handler(InsufficientFundsError)
    async def insufficient_funds_handler(
        request: Request, exc: InsufficientFundsError
    ) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.kind.value, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            ErrorKind.MALFORMED_REQUEST.value,
            _describe_validation_error(exc),
        )
