"""Tests for Operation and OperationResult."""

from decimal import Decimal

import pytest

from bank_account.core.types import OperationKind
from bank_account.domain.operation.operation import Operation, OperationResult
from bank_account.exceptions import InsufficientFundsError, InvalidAmountError


def _make_operation(
    kind: OperationKind = OperationKind.DEPOSIT,
    amount: Decimal = Decimal("10"),
    running_balance: Decimal = Decimal("10"),
) -> Operation:
    return Operation(
        kind=kind,
        amount=amount,
        operation_date="26-07-2017",
        running_balance=running_balance,
    )


class TestOperation:
    """Tests for Operation."""

    def test_deposit_signed_amount_is_positive(self) -> None:
        """A deposit adds its amount to the balance."""
        assert _make_operation(OperationKind.DEPOSIT).signed_amount == Decimal("10")

    def test_withdrawal_signed_amount_is_negative(self) -> None:
        """A withdrawal subtracts its amount from the balance."""
        assert _make_operation(OperationKind.WITHDRAWAL).signed_amount == Decimal("-10")

    def test_is_immutable(self) -> None:
        """Fields of a recorded operation cannot be changed."""
        operation = _make_operation()
        with pytest.raises(AttributeError):
            operation.amount = Decimal("20")  # type: ignore[misc]


class TestOperationResult:
    """Tests for OperationResult."""

    def test_accepted(self) -> None:
        """An accepted result carries the operation and no error."""
        operation = _make_operation()
        result = OperationResult.accepted(operation)

        assert result.success
        assert result.operation == operation
        assert result.error is None
        assert result.unwrap() == operation

    def test_rejected(self) -> None:
        """A rejected result carries the error and no operation."""
        error = InvalidAmountError(Decimal("-1"))
        result = OperationResult.rejected(error)

        assert not result.success
        assert result.operation is None
        assert result.error is error

    def test_unwrap_rejected_raises_carried_error(self) -> None:
        """Unwrapping a rejected result raises its error."""
        result = OperationResult.rejected(
            InsufficientFundsError(Decimal("5.0"), Decimal("1.0"))
        )

        with pytest.raises(InsufficientFundsError, match="cannot withdraw 5.0"):
            result.unwrap()
