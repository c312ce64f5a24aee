"""Integration tests.

Purpose
- Drive the ledger through `bootstrap()` so the message bus, handlers, unit of
  work and in-memory store are exercised together.
"""
