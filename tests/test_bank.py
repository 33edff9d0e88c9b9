import random

import pytest

from ledgerdesk.account import InactiveAccountError, InsufficientBalanceError
from ledgerdesk.bank import AccountNotFoundError, Bank, format_account_table


@pytest.fixture
def path(tmp_path):
    return tmp_path / "Accounts.txt"


@pytest.fixture
def bank(path):
    return Bank(path, rng=random.Random(0))


def test_missing_file_gives_no_accounts(bank):
    assert bank.accounts() == []


def test_added_account_is_stored(bank, path):
    account = bank.add_account("alice", "cairo")
    assert 0 <= account.number < 10000
    assert path.read_text().endswith(" alice cairo 0 T")
    reloaded = Bank(path).find(account.number)
    assert reloaded == account


def test_deposit_persists(bank, path):
    account = bank.add_account("alice", "cairo")
    bank.deposit(account.number, 40)
    assert Bank(path).find(account.number).balance == 40


def test_withdraw_persists(bank, path):
    account = bank.add_account("alice", "cairo")
    bank.deposit(account.number, 40)
    bank.withdraw(account.number, 15)
    assert Bank(path).find(account.number).balance == 40 - 15


def test_withdraw_insufficient_leaves_file(bank, path):
    account = bank.add_account("alice", "cairo")
    before = path.read_text()
    with pytest.raises(InsufficientBalanceError):
        bank.withdraw(account.number, 1)
    assert path.read_text() == before


def test_delete_deactivates(bank, path):
    account = bank.add_account("alice", "cairo")
    bank.delete_account(account.number)
    stored = Bank(path).find(account.number)
    assert stored.type_code() == "F"
    with pytest.raises(InactiveAccountError):
        bank.delete_account(account.number)


def test_update_changes_name_and_address(bank, path):
    account = bank.add_account("alice", "cairo")
    bank.update_account(account.number, "bob", "giza")
    stored = Bank(path).find(account.number)
    assert (stored.name, stored.address) == ("bob", "giza")


@pytest.mark.parametrize("name", ["", "two words"])
def test_names_must_be_single_words(bank, name):
    with pytest.raises(ValueError):
        bank.add_account(name, "cairo")


def test_unknown_account_raises(bank):
    with pytest.raises(AccountNotFoundError, match="not found"):
        bank.find(123)
    with pytest.raises(AccountNotFoundError):
        bank.deposit(123, 5)


def test_accounts_reloads_from_file(bank, path):
    bank.add_account("alice", "cairo")
    path.write_text("5 carol aswan 12 T\n")
    assert [a.name for a in bank.accounts()] == ["carol"]


def test_save_then_load_round_trip(bank, path):
    first = bank.add_account("alice", "cairo")
    second = bank.add_account("bob", "giza")
    bank.save()
    assert Bank(path).accounts() == [first, second]


def test_table_layout(bank):
    bank.add_account("alice", "cairo")
    account = bank.add_account("bob", "giza")
    bank.delete_account(account.number)
    accounts = bank.accounts()
    lines = format_account_table(accounts).splitlines()
    assert len(lines) == len(accounts) + 4
    assert lines[0] == "=" * 70
    assert lines[2] == "-" * 70
    assert lines[1].startswith("No")
    assert lines[-2].rstrip().endswith("Inactive")