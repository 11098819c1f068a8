"""Module to render the operations history of an account."""
from decimal import Decimal

from bank_account.config import HistoryFormat
from bank_account.domain.operation.operation import Operation
from bank_account.domain.operation.operation_log import OperationLog
from bank_account.infrastructure.line_sink import LineSink


class HistoryRenderer:
    """
    Renders an operation log as text lines, most recent operation first.

    The first line is always the header, even when the log is empty.
    Each operation line shows its date, its kind, its amount and the
    balance of the account right after it.
    """

    SEPARATOR = " | "
    HEADER = SEPARATOR.join(("DATE", "OPERATION", "AMOUNT", "BALANCE"))

    def __init__(
        self, line_sink: LineSink, history_format: HistoryFormat = HistoryFormat()
    ) -> None:
        self._line_sink = line_sink
        self._history_format = history_format

    @property
    def history_format(self) -> HistoryFormat:
        """Return the format used for amounts."""
        return self._history_format

    def format_amount(self, amount: Decimal) -> str:
        """Format an amount with the configured precision and currency symbol."""
        decimal_places = self._history_format.decimal_places
        return f"{amount:.{decimal_places}f}{self._history_format.currency_symbol}"

    def format_operation(self, operation: Operation) -> str:
        """Return the history line of an operation."""
        return self.SEPARATOR.join(
            (
                operation.operation_date,
                operation.kind.display_name,
                self.format_amount(operation.amount),
                self.format_amount(operation.running_balance),
            )
        )

    def render(self, operation_log: OperationLog) -> None:
        """Write the header then one line per operation, newest first."""
        self._line_sink.write_line(self.HEADER)
        for operation in reversed(operation_log):
            self._line_sink.write_line(self.format_operation(operation))
