"""Bank-account ledger kept in a plain text file, with an interactive menu."""

__version__ = "1.0.0"