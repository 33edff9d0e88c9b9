"""Interactive text menu for managing bank accounts."""

from __future__ import annotations

import argparse
import math
import sys

from .account import AccountError
from .bank import DEFAULT_PATH, AccountNotFoundError, Bank, format_account_table

_RULE = "=" * 40

_MENU_ITEMS = (
    "Add account",
    "View account",
    "Update account",
    "Delete account",
    "List all accounts",
    "Deposit to account",
    "Withdraw from account",
    "Exit",
)
_EXIT_CHOICE = len(_MENU_ITEMS)


def _first_word(line: str) -> str | None:
    words = line.split()
    return words[0] if words else None


def _parse_int(line: str) -> int | None:
    word = _first_word(line)
    try:
        return int(word) if word is not None else None
    except ValueError:
        return None


def _parse_amount(line: str) -> float | None:
    word = _first_word(line)
    try:
        value = float(word) if word is not None else None
    except ValueError:
        return None
    return value if value is not None and math.isfinite(value) else None


class _Menu:
    def __init__(self, bank: Bank, input_func, output) -> None:
        self.bank = bank
        self.input_func = input_func
        self.output = output

    def write(self, text: str) -> None:
        self.output.write(text)

    def say(self, text: str, width: int = 30) -> None:
        self.write(f"{text:<{width}}\n")

    def ask(self, prompt: str, width: int = 25) -> str:
        self.write(f"{prompt:<{width}}")
        flush = getattr(self.output, "flush", None)
        if flush is not None:
            flush()
        return self.input_func()

    def header(self, title: str) -> None:
        self.write(f"\n{_RULE}\n{title}\n{_RULE}\n")

    def rule(self) -> None:
        self.write(_RULE + "\n")

    def ask_account_number(self) -> int | None:
        number = _parse_int(self.ask("Enter account number: "))
        if number is None:
            self.say("Invalid input. Please enter a valid account number.")
        return number

    def ask_amount(self, prompt: str) -> float | None:
        amount = _parse_amount(self.ask(prompt))
        if amount is None:
            self.say("Invalid input. Please enter a valid amount.")
        return amount

    def not_found(self, number: int) -> None:
        self.say(f"Account {number} not found")
        self.rule()

    def show_menu(self) -> None:
        self.write(f"\n{_RULE}\n         Bank System Menu         \n{_RULE}\n")
        for index, label in enumerate(_MENU_ITEMS, start=1):
            self.write(f"{str(index) + '.':<3}{label}\n")
        self.write("-" * 40 + "\n")

    def add(self) -> None:
        self.header("Add New Account")
        name = _first_word(self.ask("Enter user's name: ", 20))
        address = _first_word(self.ask("Enter user's address: ", 20))
        if name is None or address is None:
            self.say("Invalid input. Please enter a valid account name.")
            return
        self.bank.add_account(name, address)
        self.say("Account added successfully!")
        self.rule()

    def view(self) -> None:
        self.bank.load()
        self.header("View Account")
        number = self.ask_account_number()
        if number is None:
            return
        try:
            account = self.bank.find(number)
        except AccountNotFoundError:
            self.not_found(number)
            return
        self.write(account.format_details())

    def _transaction(self, title: str, prompt: str, operation, verb: str, done: str) -> None:
        self.header(title)
        number = self.ask_account_number()
        if number is None:
            return
        amount = self.ask_amount(prompt)
        if amount is None:
            return
        try:
            operation(number, amount)
        except AccountNotFoundError:
            self.not_found(number)
            return
        except AccountError as error:
            self.write(f"{error}\n")
            self.rule()
            return
        self.write(f"{verb} account {number} successfully\n")
        self.say(done)
        self.rule()

    def deposit(self) -> None:
        self._transaction(
            "Deposit to Account",
            "Enter amount to deposit: ",
            self.bank.deposit,
            "Deposited to",
            "Deposit successful!",
        )

    def withdraw(self) -> None:
        self._transaction(
            "Withdraw from Account",
            "Enter amount to withdraw: ",
            self.bank.withdraw,
            "Withdrawn from",
            "Withdrawal successful!",
        )

    def delete(self) -> None:
        self.header("Delete Account")
        number = self.ask_account_number()
        if number is None:
            return
        try:
            self.bank.delete_account(number)
        except AccountNotFoundError:
            self.not_found(number)
            return
        except AccountError as error:
            self.write(f"{error}\n")
            self.rule()
            return
        self.say(f"Account {number} deleted")
        self.rule()

    def list_all(self) -> None:
        self.write("\n" + format_account_table(self.bank.accounts()))

    def update(self) -> None:
        self.bank.load()
        self.header("Update Account")
        number = self.ask_account_number()
        if number is None:
            return
        try:
            account = self.bank.find(number)
        except AccountNotFoundError:
            self.say("Account not found")
            self.rule()
            return
        self.write(account.format_details())
        name = _first_word(self.ask("Enter new account name: "))
        if name is None:
            self.say("Invalid input. Please enter a valid account name.")
            return
        address = _first_word(self.ask("Enter new account address: "))
        if address is None:
            self.say("Invalid input. Please enter a valid account address.")
            return
        self.bank.update_account(number, name, address)
        self.say(f"Account {number} was updated")
        self.rule()

    def run(self) -> None:
        actions = {
            1: self.add,
            2: self.view,
            3: self.update,
            4: self.delete,
            5: self.list_all,
            6: self.deposit,
            7: self.withdraw,
        }
        while True:
            self.show_menu()
            try:
                choice = _parse_int(self.ask("Enter your choice: "))
                if choice is None:
                    self.say("Invalid input. Please enter a valid choice.")
                    continue
                if choice == _EXIT_CHOICE:
                    return
                action = actions.get(choice)
                if action is None:
                    self.say("Invalid choice")
                    continue
                action()
            except EOFError:
                return


def run_menu(bank: Bank, input_func, output) -> None:
    """Run the menu loop until the user exits or input ends.

    ``input_func`` is called with no arguments and returns one line of input,
    raising EOFError when input is exhausted; prompts go to ``output``.
    """
    _Menu(bank, input_func, output).run()


def main(argv=None) -> int:
    """Start the interactive menu on the accounts file."""
    parser = argparse.ArgumentParser(prog="ledgerdesk", description="Manage bank accounts.")
    parser.add_argument("--file", default=DEFAULT_PATH, help="accounts file to use")
    args = parser.parse_args(argv)
    bank = Bank(args.file)
    run_menu(bank, input, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())