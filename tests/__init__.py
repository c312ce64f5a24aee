"""SAVINGS LEDGER test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Several layers wired together through `bootstrap()`.
- e2e/          : The `savings-ledger` CLI invoked through Click's CliRunner.

General guidance
- Every test builds its own ledger; nothing is shared between tests.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, e2e, property
"""
