"""Composition root for SAVINGS LEDGER.

`bootstrap()` is the only place where the in-memory store, the unit of work,
the handlers and the message bus are put together. Entry points import this
package; the domain, interfaces, adapters and service layer never import it.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
