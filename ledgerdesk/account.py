"""Bank account model and the plain-text record format used to store accounts."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice


class AccountError(Exception):
    """Base class for errors raised by account operations."""


class InactiveAccountError(AccountError):
    """Raised when an operation needs an active account."""


class InvalidAmountError(AccountError):
    """Raised when a deposit or withdrawal amount is not positive."""


class InsufficientBalanceError(AccountError):
    """Raised when a withdrawal exceeds the balance."""


_DETAILS_RULE = "-" * 31


@dataclass
class Account:
    """A single bank account."""

    name: str
    address: str
    number: int
    balance: float = 0.0
    is_active: bool = True

    def _check_transaction(self, amount: float) -> None:
        if not self.is_active:
            raise InactiveAccountError("Account is not active")
        if amount <= 0:
            raise InvalidAmountError("Amount must be greater than 0")

    def deposit(self, amount: float) -> float:
        """Add ``amount`` to the balance and return the new balance."""
        self._check_transaction(amount)
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take ``amount`` from the balance and return the new balance."""
        self._check_transaction(amount)
        if amount > self.balance:
            raise InsufficientBalanceError("Insufficient balance")
        self.balance -= amount
        return self.balance

    def deactivate(self) -> None:
        """Mark the account inactive."""
        if not self.is_active:
            raise InactiveAccountError("Account is already inactive")
        self.is_active = False

    def type_code(self) -> str:
        """Return the status letter stored in records: 'T' active, 'F' inactive."""
        return "T" if self.is_active else "F"

    def format_details(self) -> str:
        """Return the multi-line information block for this account."""
        fields = [
            ("Number:", self.number),
            ("Name:", self.name),
            ("Address:", self.address),
            ("Balance:", f"{self.balance:.2f}"),
            ("Status:", "Active" if self.is_active else "Inactive"),
        ]
        lines = [
            "",
            _DETAILS_RULE,
            "      Account Information      ",
            _DETAILS_RULE,
            *(f"{label:<15}{value}" for label, value in fields),
            _DETAILS_RULE,
        ]
        return "\n".join(lines) + "\n"

    def to_record(self) -> str:
        """Return the one-line stored form of this account."""
        return (
            f"{self.number} {self.name} {self.address} "
            f"{self.balance:g} {self.type_code()}"
        )


def parse_records(text: str) -> list[Account]:
    """Parse whitespace-separated account records, stopping at the first bad one."""
    tokens = iter(text.split())
    accounts: list[Account] = []
    while True:
        chunk = list(islice(tokens, 5))
        if len(chunk) < 5:
            break
        number_text, name, address, balance_text, type_text = chunk
        try:
            number = int(number_text)
            balance = float(balance_text)
        except ValueError:
            break
        accounts.append(
            Account(name, address, number, balance, type_text.startswith("T"))
        )
    return accounts