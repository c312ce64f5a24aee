"""Entrypoints (inbound adapters) for SAVINGS LEDGER.

Expose the application to the outside world through the command-line
interface. Parse and validate inputs, call the message bus built by
`savings_ledger.bootstrap`, and present results.

Dependency rule: may import `savings_ledger.bootstrap` and
`savings_ledger.service_layer`; avoid importing `savings_ledger.adapters`
directly.
"""
