"""In-memory holder for the account record with serialized transitions"""

import threading
from typing import Optional
from bank_account.domain.account import transition
from bank_account.domain.models import AccountRecord, Transition, INITIAL_ACCOUNT
from bank_account.domain.operations import Operation, operation_tag
from bank_account.infrastructure.observability.logging import log_transition
from bank_account.infrastructure.observability.metrics import record_transition


class AccountStore:
    """Owns the single account record and re-assigns it after each operation"""

    def __init__(self, initial: AccountRecord = INITIAL_ACCOUNT):
        self._record = initial
        # Endpoints run in a thread pool; read-apply-assign must not interleave
        self._lock = threading.Lock()

    def snapshot(self) -> AccountRecord:
        """Current record"""
        with self._lock:
            return self._record

    def dispatch(self, op: Operation, request_id: Optional[str] = None) -> Transition:
        """
        Apply an operation to the held record.

        Raises:
            UnknownOperationError: op is not an account operation
        """
        tag = operation_tag(op)
        with self._lock:
            result = transition(self._record, op)
            self._record = result.state
            # Gauges must follow the same order as the record assignments
            record_transition(tag, result)

        log_transition(request_id, tag, result)
        return result


account_store = AccountStore()
