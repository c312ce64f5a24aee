"""In-memory Unit of Work for SAVINGS LEDGER.

Snapshots the ledger on entry and restores the snapshot on rollback, so a
command that fails part-way leaves no partial state behind.
"""

from __future__ import annotations

from savings_ledger.adapters.ledger_store import InMemoryLedgerStore
from savings_ledger.interfaces.unit_of_work import AbstractUnitOfWork

from .ledger_store.memory import InMemoryLedgerData


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Snapshot-based Unit of Work over an `InMemoryLedgerStore`."""

    def __init__(self, store: InMemoryLedgerStore | None = None):
        self.store: InMemoryLedgerStore = (
            store if store is not None else InMemoryLedgerStore()
        )
        self._snapshot: InMemoryLedgerData | None = None

    def __enter__(self):
        self._snapshot = self.store.data.copy()
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self._snapshot = None

    def commit(self):
        self._snapshot = self.store.data.copy()

    def rollback(self):
        if self._snapshot is not None:
            self.store.data.restore(self._snapshot)
