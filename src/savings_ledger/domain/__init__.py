"""Domain layer for SAVINGS LEDGER.

Contains business rules: value objects, interest arithmetic, goal rules and
domain errors. This package is deliberately technology-agnostic.

Dependency rule: do not import from `savings_ledger.adapters` or
`savings_ledger.entrypoints`.
"""
