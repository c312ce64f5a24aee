"""Unit tests.

Purpose
- Check domain rules, the store, handlers, the bus, config parsing and CLI
  helpers one piece at a time.

Guidelines
- Use the in-memory store or a spy unit of work; no files or network.
- Assert on balances, checkpoints, goals and returned results, not internals.
"""
