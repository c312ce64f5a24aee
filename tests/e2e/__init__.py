"""End-to-end tests.

Purpose
- Invoke the ``savings-ledger`` command through Click's CliRunner, with
  scenario files on an isolated filesystem.
"""
