"""Account state machine - core business rules for every account operation"""

from dataclasses import replace
from bank_account.domain.models import AccountRecord, Transition
from bank_account.domain.operations import (
    Operation,
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
)
from bank_account.domain.exceptions import UnknownOperationError

OPENING_DEPOSIT = 500

INSUFFICIENT_FUNDS_NOTICE = "Not enough money!"


def _loan_notice(loan_outstanding: int) -> str:
    return f"Current loan is {loan_outstanding} $ !"


def transition(state: AccountRecord, op: Operation) -> Transition:
    """
    Compute the next account state for an operation.

    Rules:
    - Every operation except OpenAccount is ignored while the account is inactive
    - OpenAccount always sets the balance to the opening deposit, even on an
      already open account (any balance and loan are discarded)
    - Withdraw and PayLoan reject amounts larger than balance / loan and
      return a notice; RequestLoan and CloseAccount reject silently
    - PayLoan debits the full outstanding loan from the balance, while the
      loan itself only drops by the payment

    Rejected operations return the same state object.

    Raises:
        UnknownOperationError: op is not an account operation
    """
    if isinstance(op, OpenAccount):
        return Transition(state, replace(state, balance=OPENING_DEPOSIT, is_active=True))

    if not isinstance(op, (
        Deposit, SetPendingDeposit, Withdraw, SetPendingWithdrawal, RequestLoan,
        SetPendingLoanAmount, PayLoan, SetPendingPayment, CloseAccount,
    )):
        raise UnknownOperationError(f"Unknown operation: {op!r}")

    if not state.is_active:
        return Transition(state, state)

    if isinstance(op, SetPendingDeposit):
        return Transition(state, replace(state, pending_deposit=op.amount))

    elif isinstance(op, Deposit):
        return Transition(state, replace(state, balance=state.balance + state.pending_deposit))

    elif isinstance(op, SetPendingWithdrawal):
        return Transition(state, replace(state, pending_withdrawal=op.amount))

    elif isinstance(op, Withdraw):
        if state.pending_withdrawal > state.balance:
            return Transition(state, state, INSUFFICIENT_FUNDS_NOTICE)
        return Transition(state, replace(state, balance=state.balance - state.pending_withdrawal))

    elif isinstance(op, SetPendingLoanAmount):
        return Transition(state, replace(state, pending_loan_request=op.amount))

    elif isinstance(op, RequestLoan):
        if state.loan_outstanding != 0:
            return Transition(state, state)
        return Transition(state, replace(
            state,
            loan_outstanding=state.pending_loan_request,
            balance=state.balance + state.pending_loan_request,
        ))

    elif isinstance(op, SetPendingPayment):
        return Transition(state, replace(state, pending_loan_payment=op.amount))

    elif isinstance(op, PayLoan):
        if state.pending_loan_payment > state.loan_outstanding:
            return Transition(state, state, _loan_notice(state.loan_outstanding))
        return Transition(state, replace(
            state,
            loan_outstanding=state.loan_outstanding - state.pending_loan_payment,
            balance=state.balance - state.loan_outstanding,
        ))

    else:
        if state.balance != 0 or state.loan_outstanding != 0:
            return Transition(state, state)
        return Transition(state, replace(
            state,
            pending_deposit=0,
            pending_withdrawal=0,
            pending_loan_request=0,
            pending_loan_payment=0,
            is_active=False,
        ))


def apply(state: AccountRecord, op: Operation) -> AccountRecord:
    """Main entry point: next account state, without the advisory notice"""
    return transition(state, op).state
