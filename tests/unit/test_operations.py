"""Unit tests for operation parsing"""

import pytest
from bank_account.domain.operations import (
    parse_operation,
    operation_tag,
    OPERATION_TAGS,
    OpenAccount,
    SetPendingDeposit,
    SetPendingPayment,
    CloseAccount,
)
from bank_account.domain.exceptions import InvalidOperationDataError, UnknownOperationError


def test_parse_operation_without_amount():
    assert parse_operation("open_account") == OpenAccount()
    assert parse_operation("close_account") == CloseAccount()


def test_parse_operation_with_amount():
    assert parse_operation("set_pending_deposit", 200) == SetPendingDeposit(amount=200)
    assert parse_operation("set_pending_payment", 0) == SetPendingPayment(amount=0)


def test_parse_operation_unknown_tag():
    with pytest.raises(UnknownOperationError):
        parse_operation("transfer")


def test_parse_operation_missing_amount():
    with pytest.raises(InvalidOperationDataError):
        parse_operation("set_pending_withdrawal")


def test_parse_operation_unexpected_amount():
    with pytest.raises(InvalidOperationDataError):
        parse_operation("deposit", 100)


@pytest.mark.parametrize("tag", sorted(OPERATION_TAGS))
def test_operation_tag_matches_parse(tag):
    amount = 1 if tag.startswith("set_pending") else None
    assert operation_tag(parse_operation(tag, amount)) == tag


def test_operation_tag_unknown():
    with pytest.raises(UnknownOperationError):
        operation_tag("deposit")
