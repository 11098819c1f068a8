"""Custom exception hierarchy for bank account."""
from decimal import Decimal


class BankAccountError(Exception):
    """Base exception for all bank account errors."""


class InvalidAmountError(BankAccountError):
    """A deposit or withdrawal was requested with a negative amount."""

    def __init__(self, amount: Decimal | float) -> None:
        super().__init__(f"Invalid amount: {amount!r}. Amounts must be non-negative.")
        self.amount = amount


class InsufficientFundsError(BankAccountError):
    """A withdrawal was requested for more than the current balance."""

    def __init__(self, amount: Decimal, balance: Decimal) -> None:
        super().__init__(
            f"Insufficient funds: cannot withdraw {amount} from a balance of {balance}"
        )
        self.amount = amount
        self.balance = balance
