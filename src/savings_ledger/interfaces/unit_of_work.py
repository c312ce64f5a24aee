"""Unit of Work port for SAVINGS LEDGER.

A unit of work brackets one command: handlers read and write the ledger
through `uow.store` inside a ``with uow:`` block and call `commit()` once all
writes are staged. Leaving the block without committing discards every write
made since entry, so a rejected command never leaves the ledger half-updated.
"""

from __future__ import annotations

import abc

from .ledger_store import LedgerStore


class AbstractUnitOfWork(abc.ABC):
    """Transactional boundary around the ledger store."""

    store: LedgerStore

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *args):
        # Uncommitted writes are discarded; after commit() this is a no-op.
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Make the writes staged since entry (or the last commit) durable."""

    @abc.abstractmethod
    def rollback(self):
        """Drop the writes staged since entry (or the last commit)."""
