"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from bank_account.api.main import create_app
from bank_account.api.dependencies import get_account_store
from bank_account.domain.account import apply
from bank_account.domain.models import AccountRecord, INITIAL_ACCOUNT
from bank_account.domain.operations import OpenAccount, SetPendingDeposit, Deposit
from bank_account.infrastructure.store import AccountStore


@pytest.fixture
def store() -> AccountStore:
    """Fresh store holding the initial closed account"""
    return AccountStore()


@pytest.fixture
def client(store: AccountStore) -> TestClient:
    """Create FastAPI test client backed by the test store"""
    app = create_app()
    app.dependency_overrides[get_account_store] = lambda: store
    return TestClient(app)


@pytest.fixture
def opened_account() -> AccountRecord:
    """Account right after opening: balance 500, no loan"""
    return apply(INITIAL_ACCOUNT, OpenAccount())


@pytest.fixture
def funded_account(opened_account: AccountRecord) -> AccountRecord:
    """Opened account after depositing 200: balance 700"""
    state = apply(opened_account, SetPendingDeposit(200))
    return apply(state, Deposit())
