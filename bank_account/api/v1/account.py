"""Account endpoints - read the record, dispatch operations, stage amounts"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from bank_account.api.v1.schemas import (
    AccountResponse,
    OperationRequest,
    OperationResponse,
    PendingAmountRequest,
    PendingAmountResponse,
)
from bank_account.api.dependencies import get_account_store, get_request_id
from bank_account.infrastructure.store import AccountStore
from bank_account.infrastructure.observability.metrics import record_discarded_input
from bank_account.infrastructure.observability.logging import log_discarded_input
from bank_account.domain.operations import (
    parse_operation,
    SetPendingDeposit,
    SetPendingWithdrawal,
    SetPendingLoanAmount,
    SetPendingPayment,
)
from bank_account.domain.exceptions import InvalidOperationDataError, UnknownOperationError
from bank_account.utils.amounts import parse_amount

router = APIRouter()

PENDING_FIELDS = {
    "deposit": SetPendingDeposit,
    "withdrawal": SetPendingWithdrawal,
    "loan": SetPendingLoanAmount,
    "payment": SetPendingPayment,
}


@router.get("/account", response_model=AccountResponse)
def get_account(store: AccountStore = Depends(get_account_store)):
    """Current balance, loan and staged amounts"""
    return AccountResponse.from_record(store.snapshot())


@router.post("/account/operations", response_model=OperationResponse)
def dispatch_operation(
    request_body: OperationRequest,
    store: AccountStore = Depends(get_account_store),
    request_id: str = Depends(get_request_id),
):
    """
    Apply one operation to the account.

    Business-rule rejections are not errors: the response carries the
    unchanged account, changed=false, and a notice for rejected withdrawals
    and loan payments.
    """
    try:
        op = parse_operation(request_body.type, request_body.amount)
    except UnknownOperationError as e:
        logging.error(f"Unknown operation: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))
    except InvalidOperationDataError as e:
        logging.warning(f"Invalid operation data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    result = store.dispatch(op, request_id=request_id)

    return OperationResponse(
        account=AccountResponse.from_record(result.state),
        changed=result.changed,
        notice=result.notice,
    )


@router.put("/account/pending/{field}", response_model=PendingAmountResponse)
def set_pending_amount(
    field: str,
    request_body: PendingAmountRequest,
    store: AccountStore = Depends(get_account_store),
    request_id: str = Depends(get_request_id),
):
    """
    Stage an amount from raw user input.

    Input that is not an unsigned whole number ("-5", "abc", "1.5") is
    discarded: nothing is dispatched and the current account is returned
    with discarded=true.
    """
    op_type = PENDING_FIELDS.get(field)
    if op_type is None:
        raise HTTPException(status_code=404, detail=f"Unknown pending field: {field}")

    amount = parse_amount(request_body.value)
    if amount is None:
        record_discarded_input(field)
        log_discarded_input(request_id, field)
        return PendingAmountResponse(account=AccountResponse.from_record(store.snapshot()), discarded=True)

    result = store.dispatch(op_type(amount=amount), request_id=request_id)
    return PendingAmountResponse(account=AccountResponse.from_record(result.state), discarded=False)
