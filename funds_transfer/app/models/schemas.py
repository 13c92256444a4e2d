from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, condecimal

MONEY_MAX_DIGITS = 18
MONEY_DECIMAL_PLACES = 2

# Sign is left to the transfer validator so its error order is preserved.
Money = condecimal(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)


class AccountState(BaseModel):
    id: int
    balance: Decimal = Field(..., ge=0, description="Current balance, exact decimal")


class TransferRequest(BaseModel):
    # Every field is optional here; missing values are reported by the
    # transfer validator so the caller sees its messages in a fixed order.
    model_config = ConfigDict(populate_by_name=True)

    source_account_id: Optional[int] = Field(default=None, alias="from")
    dest_account_id: Optional[int] = Field(default=None, alias="to")
    amount: Optional[Money] = None


class TransferOutcome(BaseModel):
    status: Literal["success"] = "success"


class ErrorResponse(BaseModel):
    kind: str
    message: str
