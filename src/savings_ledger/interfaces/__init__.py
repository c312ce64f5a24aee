"""Interfaces (application boundary) for SAVINGS LEDGER.

Defines framework-free application contracts: ABCs shared by the service layer
and adapters. Business rules stay out of this package.

Dependency rule: may import `savings_ledger.domain` value objects only. It may
be imported by `savings_ledger.service_layer`, `savings_ledger.adapters`, and
`savings_ledger.bootstrap`.
"""
