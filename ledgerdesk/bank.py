"""A collection of accounts persisted to a plain-text file."""

from __future__ import annotations

import random
from pathlib import Path

from .account import Account, parse_records

DEFAULT_PATH = "Accounts.txt"


class AccountNotFoundError(LookupError):
    """Raised when no account has the requested number."""

    def __init__(self, number: int) -> None:
        super().__init__(f"Account {number} not found")
        self.number = number


def _check_word(value: str, what: str) -> None:
    if not value or value.split() != [value]:
        raise ValueError(f"account {what} must be a single word")


class Bank:
    """Accounts stored one record per line in a text file."""

    def __init__(self, path: str | Path = DEFAULT_PATH, rng: random.Random | None = None):
        self.path = Path(path)
        self._rng = rng if rng is not None else random.Random()
        self._accounts: list[Account] = []
        self.load()

    def load(self) -> None:
        """Replace the in-memory accounts with those stored in the file."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            text = ""
        self._accounts = parse_records(text)

    def save(self) -> None:
        """Rewrite the file from the in-memory accounts."""
        self.path.write_text(
            "".join(account.to_record() + "\n" for account in self._accounts),
            encoding="utf-8",
        )

    def add_account(self, name: str, address: str) -> Account:
        """Open a new active account with a random number below 10000."""
        _check_word(name, "name")
        _check_word(address, "address")
        account = Account(name, address, self._rng.randrange(10000))
        self._accounts.append(account)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write("\n" + account.to_record())
        return account

    def find(self, number: int) -> Account:
        """Return the loaded account with ``number``."""
        for account in self._accounts:
            if account.number == number:
                return account
        raise AccountNotFoundError(number)

    def _reload_and_find(self, number: int) -> Account:
        self.load()
        return self.find(number)

    def deposit(self, number: int, amount: float) -> Account:
        """Deposit into the stored account and persist the change."""
        account = self._reload_and_find(number)
        account.deposit(amount)
        self.save()
        return account

    def withdraw(self, number: int, amount: float) -> Account:
        """Withdraw from the stored account and persist the change."""
        account = self._reload_and_find(number)
        account.withdraw(amount)
        self.save()
        return account

    def delete_account(self, number: int) -> Account:
        """Deactivate the stored account and persist the change."""
        account = self._reload_and_find(number)
        account.deactivate()
        self.save()
        return account

    def update_account(self, number: int, name: str, address: str) -> Account:
        """Change the name and address of the stored account."""
        _check_word(name, "name")
        _check_word(address, "address")
        account = self._reload_and_find(number)
        account.name = name
        account.address = address
        self.save()
        return account

    def accounts(self) -> list[Account]:
        """Reload from the file and return all accounts."""
        self.load()
        return list(self._accounts)


def format_account_table(accounts) -> str:
    """Return a fixed-width table of the given accounts."""
    columns = ((12, "No"), (20, "Name"), (25, "Address"), (12, "Balance"), (10, "Status"))
    widths = [width for width, _ in columns]

    def row(values) -> str:
        return "".join(f"{value:<{width}}" for width, value in zip(widths, values))

    lines = ["=" * 70, row(title for _, title in columns), "-" * 70]
    lines.extend(
        row(
            (
                account.number,
                account.name,
                account.address,
                f"{account.balance:.2f}",
                "Active" if account.type_code() == "T" else "Inactive",
            )
        )
        for account in accounts
    )
    lines.append("=" * 70)
    return "\n".join(lines) + "\n"