"""Module for the OperationLog class."""
from collections.abc import Iterator
from decimal import Decimal

from bank_account.core.types import OperationDate, OperationKind
from bank_account.domain.operation.operation import Operation


class OperationLog:
    """
    Append-only record of the operations of an account, oldest first.

    The log is the only source of truth for the account balance: each
    operation stores the balance right after it was applied, so the current
    balance is the running balance of the last operation.
    """

    def __init__(self) -> None:
        self._operations: list[Operation] = []
        self._balance = Decimal(0)

    @property
    def balance(self) -> Decimal:
        """Return the current balance, 0 when no operation was recorded."""
        return self._balance

    @property
    def operations(self) -> tuple[Operation, ...]:
        """Return all the operations, oldest first."""
        return tuple(self._operations)

    def append(
        self, kind: OperationKind, amount: Decimal, operation_date: OperationDate
    ) -> Operation:
        """Record a new operation at the end of the log and return it.

        The amount is not validated here, this is the account's job.
        """
        operation = Operation(
            kind=kind,
            amount=amount,
            operation_date=operation_date,
            running_balance=self._balance + kind.sign * amount,
        )
        self._operations.append(operation)
        self._balance = operation.running_balance
        return operation

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[Operation]:
        return iter(tuple(self._operations))

    def __reversed__(self) -> Iterator[Operation]:
        return reversed(tuple(self._operations))

    def __repr__(self) -> str:
        return f"OperationLog({len(self)} operations, balance={self._balance})"
