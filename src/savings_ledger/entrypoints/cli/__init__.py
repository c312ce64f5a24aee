"""Command-line interface for SAVINGS LEDGER."""
