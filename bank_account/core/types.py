"""Module containing custom types for the bank_account package."""
import enum

OperationDate = str
"""Date of an operation, stored verbatim as provided by the date source."""


class OperationKind(enum.StrEnum):
    """Kind of an account operation.

    The enum *value* is a lower-case key.
    Use :attr:`display_name` for the rendered label.
    """

    DEPOSIT = enum.auto()
    WITHDRAWAL = enum.auto()

    @property
    def sign(self) -> int:
        """Return +1 for operations crediting the account, -1 otherwise."""
        return 1 if self is OperationKind.DEPOSIT else -1

    @property
    def display_name(self) -> str:
        """Return the label of this kind in the rendered history."""
        return self.name
