# ledgerdesk

A small menu-driven ledger for bank accounts. Accounts are kept in a plain
text file, `Accounts.txt` in the current directory unless another file is
given. There is one account per line:

```
<number> <name> <address> <balance> <T|F>
```

`T` marks an active account and `F` marks one that has been deleted
(deactivated). Names and addresses are single words. When the file is read,
reading stops at the first record that cannot be parsed. A missing file is
treated as empty.

## Installing

```
pip install .
```

## Using the menu

```
ledgerdesk
ledgerdesk --file other-accounts.txt
```

`--file` chooses the accounts file (default `Accounts.txt`). The command
opens a menu:

1. Add account: asks for a name and an address, then gives the account a random number below 10000
2. View account
3. Update account: changes the name and the address
4. Delete account: marks the account inactive
5. List all accounts
6. Deposit to account
7. Withdraw from account
8. Exit

Deposits and withdrawals must be greater than zero. Inactive accounts refuse
both, and an inactive account cannot be deleted again. A withdrawal cannot be
larger than the balance. The menu also ends when input runs out.

## Using it from Python

```python
from ledgerdesk.bank import Bank, format_account_table

bank = Bank("Accounts.txt")
account = bank.add_account("alice", "springfield")
bank.deposit(account.number, 100.0)
bank.withdraw(account.number, 25.0)
print(format_account_table(bank.accounts()))
```

`Bank` reads the file when it is created; `load()` reads it again and
`save()` rewrites it. `find(number)` looks an account up among those loaded.
`deposit`, `withdraw`, `delete_account` and `update_account` reload the file,
change the account, save, and return the `Account`. `accounts()` reloads and
returns a list of all accounts. `Bank` also takes an `rng` argument, a
`random.Random`, used to pick new account numbers.

`Account` (in `ledgerdesk.account`) has `deposit`, `withdraw`, `deactivate`,
`type_code`, `format_details` and `to_record`; `parse_records(text)` turns the
file's text into a list of accounts.

`ledgerdesk.cli.run_menu(bank, input_func, output)` runs the menu with any
line-reading function and writable stream.

Failures raise exceptions. `AccountNotFoundError` comes from `ledgerdesk.bank`.
`InactiveAccountError`, `InvalidAmountError` and `InsufficientBalanceError`
come from `ledgerdesk.account`, and all three are subclasses of `AccountError`.
`add_account` and `update_account` raise `ValueError` for a name or address
that is empty or not a single word.

## Limits

- New account numbers are random and are not checked against existing ones,
  so two accounts can share a number; lookups then find the first.
- Balances are written to the file in a short general number form (six
  significant digits), so large balances lose precision when saved.
- There is no locking: two processes using the same file can overwrite each
  other's changes.

## Running the tests

```
pip install ".[test]"
pytest
```