"""Service layer for SAVINGS LEDGER.

Implements application use-cases: command handlers, orchestration, and
transaction boundaries. Calls domain rules and the ports defined in
`savings_ledger.interfaces`.

Dependency rule: may import `savings_ledger.domain` and
`savings_ledger.interfaces`, but not `savings_ledger.adapters` or
`savings_ledger.entrypoints`.
"""
