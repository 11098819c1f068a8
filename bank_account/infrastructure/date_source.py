"""Module for the DateSource protocol and its system implementation."""
from datetime import date
from typing import Protocol

from bank_account.core.types import OperationDate


class DateSource(Protocol):  # pylint: disable=too-few-public-methods
    """Provider of the date used to stamp new operations."""

    def todays_date(self) -> OperationDate:
        """Return today's date as a string."""


class SystemDateSource:  # pylint: disable=too-few-public-methods
    """Date source reading the local system clock."""

    DEFAULT_DATE_FORMAT = "%d-%m-%Y"

    def __init__(self, date_format: str = DEFAULT_DATE_FORMAT) -> None:
        self._date_format = date_format

    @property
    def date_format(self) -> str:
        """Return the strftime format of the produced dates."""
        return self._date_format

    def todays_date(self) -> OperationDate:
        return date.today().strftime(self._date_format)
