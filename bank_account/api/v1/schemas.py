"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Optional

from bank_account.domain.models import AccountRecord


class AccountResponse(BaseModel):
    """Current account record"""

    balance: int
    loan_outstanding: int
    is_active: bool
    pending_deposit: int
    pending_withdrawal: int
    pending_loan_request: int
    pending_loan_payment: int

    @classmethod
    def from_record(cls, record: AccountRecord) -> "AccountResponse":
        return cls(
            balance=record.balance,
            loan_outstanding=record.loan_outstanding,
            is_active=record.is_active,
            pending_deposit=record.pending_deposit,
            pending_withdrawal=record.pending_withdrawal,
            pending_loan_request=record.pending_loan_request,
            pending_loan_payment=record.pending_loan_payment,
        )


class OperationRequest(BaseModel):
    """Request body for POST /v1/account/operations"""

    type: str = Field(..., min_length=1, description="Operation tag, e.g. open_account")
    amount: Optional[int] = Field(None, ge=0, description="Non-negative amount for set_pending_* operations")


class OperationResponse(BaseModel):
    """Response for POST /v1/account/operations"""

    account: AccountResponse
    changed: bool
    notice: Optional[str] = None


class PendingAmountRequest(BaseModel):
    """Request body for PUT /v1/account/pending/{field}"""

    value: str = Field(..., description="Raw text typed by the user")


class PendingAmountResponse(BaseModel):
    """Response for PUT /v1/account/pending/{field}"""

    account: AccountResponse
    discarded: bool
