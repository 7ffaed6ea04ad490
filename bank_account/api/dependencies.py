"""Request-scoped providers for the account routes"""

from fastapi import Request
from bank_account.infrastructure.store import AccountStore, account_store


def get_request_id(request: Request) -> str:
    """Request ID assigned by RequestIDMiddleware, used to correlate operation logs"""
    return getattr(request.state, "request_id", "unknown")


def get_account_store() -> AccountStore:
    """The single account holder; tests override this with a fresh store"""
    return account_store
