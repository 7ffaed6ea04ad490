"""Domain models - immutable dataclasses representing the account and its transitions"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AccountRecord:
    """Single bank account with the amounts staged for the next operation"""

    balance: int = 0
    loan_outstanding: int = 0  # 0 means no active loan
    is_active: bool = False
    pending_deposit: int = 0
    pending_withdrawal: int = 0
    pending_loan_request: int = 0
    pending_loan_payment: int = 0


INITIAL_ACCOUNT = AccountRecord()


@dataclass(frozen=True)
class Transition:
    """Result of applying an operation: next state plus optional advisory notice"""

    previous: AccountRecord
    state: AccountRecord
    notice: Optional[str] = None

    @property
    def changed(self) -> bool:
        """True only when the next state differs in value, so a zero deposit counts as rejected"""
        return self.state != self.previous
