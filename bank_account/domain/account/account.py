"""This module contains the Account class."""
import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from bank_account.core.types import OperationDate, OperationKind
from bank_account.domain.operation.operation import Operation, OperationResult
from bank_account.domain.operation.operation_log import OperationLog
from bank_account.exceptions import (
    BankAccountError,
    InsufficientFundsError,
    InvalidAmountError,
)
from bank_account.infrastructure.date_source import DateSource

if TYPE_CHECKING:
    from bank_account.services.history.history_renderer import HistoryRenderer

logger = logging.getLogger(__name__)


class Account:
    """
    A bank account holding a running balance.

    Deposits and withdrawals are validated then recorded in the operation log
    of the account. A rejected request leaves the account untouched and is
    reported through the returned OperationResult.

    Amounts are kept as Decimal: floats are converted through their shortest
    representation, so that ``deposit(0.3)`` then ``withdraw(0.1)`` leaves
    exactly ``Decimal("0.2")``.
    """

    def __init__(
        self, date_source: DateSource, history_renderer: "HistoryRenderer"
    ) -> None:
        self._date_source = date_source
        self._history_renderer = history_renderer
        self._operation_log = OperationLog()

    @property
    def balance(self) -> Decimal:
        """Return the current balance of the account."""
        return self._operation_log.balance

    @property
    def operations(self) -> tuple[Operation, ...]:
        """Return all the operations, oldest first."""
        return self._operation_log.operations

    @property
    def operations_amounts(self) -> tuple[Decimal, ...]:
        """Return the amount of each operation, oldest first."""
        return tuple(operation.amount for operation in self._operation_log)

    @property
    def operations_kinds(self) -> tuple[OperationKind, ...]:
        """Return the kind of each operation, oldest first."""
        return tuple(operation.kind for operation in self._operation_log)

    @property
    def operations_dates(self) -> tuple[OperationDate, ...]:
        """Return the date of each operation, oldest first."""
        return tuple(operation.operation_date for operation in self._operation_log)

    def deposit(self, amount: Decimal | float) -> OperationResult:
        """Deposit money on the account.

        Returns:
            The recorded operation, or an InvalidAmountError if the amount
            is negative.
        """
        value = Decimal(str(amount))
        if not self._is_valid_amount(value):
            return self._reject(OperationKind.DEPOSIT, InvalidAmountError(amount))
        return self._record(OperationKind.DEPOSIT, value)

    def withdraw(self, amount: Decimal | float) -> OperationResult:
        """Withdraw money from the account.

        Returns:
            The recorded operation, or an InvalidAmountError if the amount is
            negative, or an InsufficientFundsError if it exceeds the balance.
        """
        value = Decimal(str(amount))
        if not self._is_valid_amount(value):
            return self._reject(OperationKind.WITHDRAWAL, InvalidAmountError(amount))
        if value > self.balance:
            return self._reject(
                OperationKind.WITHDRAWAL, InsufficientFundsError(value, self.balance)
            )
        return self._record(OperationKind.WITHDRAWAL, value)

    def print_history(self) -> None:
        """Render the operations history, most recent first."""
        self._history_renderer.render(self._operation_log)

    @staticmethod
    def _is_valid_amount(amount: Decimal) -> bool:
        # NaN must be ruled out before any ordering comparison
        return amount.is_finite() and amount >= 0

    def _record(self, kind: OperationKind, amount: Decimal) -> OperationResult:
        operation = self._operation_log.append(
            kind, amount, self._date_source.todays_date()
        )
        logger.debug(
            "Recorded %s of %s on %s, balance is now %s",
            kind,
            amount,
            operation.operation_date,
            operation.running_balance,
        )
        return OperationResult.accepted(operation)

    @staticmethod
    def _reject(kind: OperationKind, error: BankAccountError) -> OperationResult:
        logger.info("Rejected %s: %s", kind, error)
        return OperationResult.rejected(error)
