"""Services layer for bank account.

This module provides the history rendering and the wiring of accounts from
the configuration.
"""

from bank_account.services.account_factory import create_account
from bank_account.services.history.history_renderer import HistoryRenderer

__all__ = [
    "HistoryRenderer",
    "create_account",
]
