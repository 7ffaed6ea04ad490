"""Account operations as a closed set of frozen dataclasses"""

from dataclasses import dataclass
from typing import Dict, Optional, Union
from bank_account.domain.exceptions import InvalidOperationDataError, UnknownOperationError


@dataclass(frozen=True)
class OpenAccount:
    pass


@dataclass(frozen=True)
class Deposit:
    pass


@dataclass(frozen=True)
class SetPendingDeposit:
    amount: int


@dataclass(frozen=True)
class Withdraw:
    pass


@dataclass(frozen=True)
class SetPendingWithdrawal:
    amount: int


@dataclass(frozen=True)
class RequestLoan:
    pass


@dataclass(frozen=True)
class SetPendingLoanAmount:
    amount: int


@dataclass(frozen=True)
class PayLoan:
    pass


@dataclass(frozen=True)
class SetPendingPayment:
    amount: int


@dataclass(frozen=True)
class CloseAccount:
    pass


Operation = Union[
    OpenAccount,
    Deposit,
    SetPendingDeposit,
    Withdraw,
    SetPendingWithdrawal,
    RequestLoan,
    SetPendingLoanAmount,
    PayLoan,
    SetPendingPayment,
    CloseAccount,
]

# Wire tags used at the HTTP boundary
OPERATION_TAGS: Dict[str, type] = {
    "open_account": OpenAccount,
    "deposit": Deposit,
    "set_pending_deposit": SetPendingDeposit,
    "withdraw": Withdraw,
    "set_pending_withdrawal": SetPendingWithdrawal,
    "request_loan": RequestLoan,
    "set_pending_loan_amount": SetPendingLoanAmount,
    "pay_loan": PayLoan,
    "set_pending_payment": SetPendingPayment,
    "close_account": CloseAccount,
}

AMOUNT_OPERATIONS = (SetPendingDeposit, SetPendingWithdrawal, SetPendingLoanAmount, SetPendingPayment)


def operation_tag(op: Operation) -> str:
    """Reverse lookup of the wire tag, used for logs and metric labels"""
    for tag, op_type in OPERATION_TAGS.items():
        if type(op) is op_type:
            return tag
    raise UnknownOperationError(f"Unknown operation: {op!r}")


def parse_operation(tag: str, amount: Optional[int] = None) -> Operation:
    """
    Build an operation from its wire tag and optional amount.

    Raises:
        UnknownOperationError: tag is not a known operation
        InvalidOperationDataError: amount missing for a "set pending"
            operation, or given to an operation that takes none
    """
    op_type = OPERATION_TAGS.get(tag)
    if op_type is None:
        raise UnknownOperationError(f"Unknown operation: {tag!r}")

    if op_type in AMOUNT_OPERATIONS:
        if amount is None:
            raise InvalidOperationDataError(f"Operation {tag!r} requires an amount")
        return op_type(amount=amount)

    if amount is not None:
        raise InvalidOperationDataError(f"Operation {tag!r} does not take an amount")
    return op_type()
