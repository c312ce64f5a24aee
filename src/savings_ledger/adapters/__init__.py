"""Adapters (infrastructure) for SAVINGS LEDGER.

Provide concrete implementations of the application ports (ledger store,
unit of work).

Dependency rule: may import `savings_ledger.domain` and
`savings_ledger.interfaces`; the domain must not import this package.
"""
