"""SAVINGS LEDGER

A deterministic, in-memory ledger model of a savings contract. It settles
simple interest per block height, records savings goals, and reports progress
toward them.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
