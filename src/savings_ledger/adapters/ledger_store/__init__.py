"""Ledger store adapters."""

from .memory import InMemoryLedgerData, InMemoryLedgerStore

__all__ = ["InMemoryLedgerData", "InMemoryLedgerStore"]
