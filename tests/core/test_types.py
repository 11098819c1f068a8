"""Tests for the core types."""

import pytest

from bank_account.core.types import OperationKind


class TestOperationKind:
    """Tests for OperationKind."""

    @pytest.mark.parametrize(
        "kind,expected_sign",
        [(OperationKind.DEPOSIT, 1), (OperationKind.WITHDRAWAL, -1)],
        ids=["deposit", "withdrawal"],
    )
    def test_sign(self, kind: OperationKind, expected_sign: int) -> None:
        """Deposits credit the account, withdrawals debit it."""
        assert kind.sign == expected_sign

    def test_display_name_is_upper_case_name(self) -> None:
        """The display name is the upper-case kind name."""
        assert OperationKind.DEPOSIT.display_name == "DEPOSIT"
        assert OperationKind.WITHDRAWAL.display_name == "WITHDRAWAL"

    def test_values_are_lower_case_keys(self) -> None:
        """Enum values are lower-case keys."""
        assert OperationKind.DEPOSIT == "deposit"
        assert OperationKind.WITHDRAWAL == "withdrawal"
