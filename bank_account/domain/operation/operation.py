"""Operation module."""
from decimal import Decimal
from typing import NamedTuple

from bank_account.core.types import OperationDate, OperationKind
from bank_account.exceptions import BankAccountError


class Operation(NamedTuple):
    """A deposit or a withdrawal recorded on an account.

    The amount is always non-negative, its sign is given by the kind.
    """

    kind: OperationKind
    amount: Decimal
    operation_date: OperationDate
    running_balance: Decimal
    """Balance of the account right after this operation was applied."""

    @property
    def signed_amount(self) -> Decimal:
        """The amount as it affects the balance."""
        return self.kind.sign * self.amount


class OperationResult(NamedTuple):
    """Result of a deposit or withdrawal request."""

    success: bool
    operation: Operation | None
    """The recorded operation (None if the request was rejected)."""
    error: BankAccountError | None = None

    @classmethod
    def accepted(cls, operation: Operation) -> "OperationResult":
        """Build the result of an accepted request."""
        return cls(success=True, operation=operation)

    @classmethod
    def rejected(cls, error: BankAccountError) -> "OperationResult":
        """Build the result of a rejected request."""
        return cls(success=False, operation=None, error=error)

    def unwrap(self) -> Operation:
        """Return the recorded operation, or raise the error of a rejected request."""
        if self.error is not None:
            raise self.error
        assert self.operation is not None
        return self.operation
